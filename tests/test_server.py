import logging

import pytest

from stickit.logging_setup import setup_logging
from stickit.server import parse_args


def test_parse_args_defaults():
    args = parse_args([])
    assert args.port == 1339
    assert args.reset is False


def test_parse_args_overrides():
    args = parse_args(["--port", "8080", "--reset", "--log-dir", "/tmp/x"])
    assert args.port == 8080
    assert args.reset is True
    assert args.log_dir == "/tmp/x"


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)
    logging.captureWarnings(False)


def test_setup_logging_writes_log_file(tmp_path, restore_root_logger):
    log_file = setup_logging(tmp_path / "logs", "WARNING")
    logging.getLogger("stickit.test").info("hello from the test")
    for handler in logging.getLogger().handlers:
        handler.flush()
    assert log_file == tmp_path / "logs" / "server.log"
    assert "hello from the test" in log_file.read_text(encoding="utf-8")
