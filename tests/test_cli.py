"""Tests for the command-line entry point (the curses session is stubbed)."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

import speq
from speq import cli
from speq.app import App
from speq.log import setup_logging


@pytest.fixture(autouse=True)
def _keep_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    # root handlers installed by pytest (caplog) must survive main()
    monkeypatch.setattr(cli, "setup_logging", lambda *args: None)


class TestMain:
    def test_load_error_exits_with_status_1(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        missing = tmp_path / "nope.yaml"
        with caplog.at_level(logging.ERROR):
            assert cli.main([str(missing)]) == 1
        assert str(missing) in caplog.text

    def test_runs_session(
        self, petstore_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        sessions: list[App] = []
        monkeypatch.setattr(cli, "run", sessions.append)
        assert cli.main(["--scroll-step", "7", str(petstore_path)]) == 0
        (app,) = sessions
        assert app.spec.title == "Petstore"
        assert app.config.scroll_step == 7

    def test_invalid_config_is_usage_error(self, petstore_path: Path) -> None:
        with pytest.raises(SystemExit) as excinfo:
            cli.main(["--scroll-step", "0", str(petstore_path)])
        assert excinfo.value.code == 2

    def test_version(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit):
            cli.main(["--version"])
        assert "0.1.0" in capsys.readouterr().out

    def test_version_matches_package(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with pytest.raises(SystemExit) as excinfo:
            cli.main(["-V"])
        assert excinfo.value.code == 0
        assert capsys.readouterr().out.strip() == speq.__version__

    def test_unwritable_log_file_is_usage_error(
        self,
        tmp_path: Path,
        petstore_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        # opening the file fails before any root handler is replaced
        monkeypatch.setattr(cli, "setup_logging", setup_logging)
        log_file = tmp_path / "missing" / "speq.log"
        with pytest.raises(SystemExit) as excinfo:
            cli.main(["--log-file", str(log_file), str(petstore_path)])
        assert excinfo.value.code == 2
        assert "cannot open log file" in capsys.readouterr().err
