"""Settings, master key checks and logging setup."""

import logging
import os

import pytest

from jokes_api.app.core.config import Settings
from jokes_api.app.core.logging_config import setup_logging
from jokes_api.app.core.security import verify_master_key


def test_server_url_defaults_to_localhost():
    assert Settings(port=4000, public_url="").server_url == "http://localhost:4000"


def test_server_url_prefers_public_url():
    settings = Settings(public_url="https://jokes.example.com")
    assert settings.server_url == "https://jokes.example.com"


def test_settings_defaults_from_environment():
    settings = Settings()
    assert settings.master_key == os.environ["MASTER_KEY"]
    assert isinstance(settings.port, int)


@pytest.mark.parametrize(
    "supplied, expected, result",
    [
        ("secret", "secret", True),
        ("Secret", "secret", False),
        ("wrong", "secret", False),
        (None, "secret", False),
        ("", "", False),
        (None, "", False),
        ("anything", None, False),
    ],
)
def test_verify_master_key(supplied, expected, result):
    assert verify_master_key(supplied, expected) is result


def test_setup_logging_is_idempotent():
    root = logging.getLogger()
    setup_logging("DEBUG")
    handlers = list(root.handlers)
    setup_logging("DEBUG")
    assert root.handlers == handlers


def test_setup_logging_routes_uvicorn_loggers_through_root():
    access = logging.getLogger("uvicorn.access")
    access.addHandler(logging.NullHandler())
    access.propagate = False
    setup_logging("WARNING")
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        server_logger = logging.getLogger(name)
        assert server_logger.handlers == []
        assert server_logger.propagate is True
        assert server_logger.level == logging.WARNING


def test_setup_logging_writes_to_log_file(tmp_path, monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    previous_level = root.level
    logfile = tmp_path / "jokes.log"
    setup_logging("info", str(logfile))
    try:
        assert len(root.handlers) == 2
        logging.getLogger("jokes_api.test").info("Created joke %s", 7)
        for handler in root.handlers:
            handler.flush()
        assert "[INFO] jokes_api.test: Created joke 7" in logfile.read_text(encoding="utf-8")
    finally:
        for handler in root.handlers:
            handler.close()
        root.setLevel(previous_level)
