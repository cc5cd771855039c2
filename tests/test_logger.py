import logging
from datetime import datetime

import pytest

from app import create_app
from Utils.config import TestingConfig
from Utils.logger import summarize_log_dir


@pytest.fixture
def file_logging_app(tmp_path):
    config = type("FileLoggingConfig", (TestingConfig,), {
        "TESTING": False,
        "LOG_DIR": str(tmp_path / "logs"),
    })
    app = create_app(config, connect_db=False)
    yield app

    # Named loggers are process-wide; detach what this app attached
    root_logger = logging.getLogger()
    for handler in list(app.logger.handlers):
        if handler in root_logger.handlers:
            root_logger.removeHandler(handler)
    for logger in (app.logger, logging.getLogger("access"), logging.getLogger("posts")):
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        logger.propagate = True


def test_error_is_written_once_to_error_log(file_logging_app, tmp_path):
    file_logging_app.logger.error("wallet-marker")

    error_handlers = {
        handler
        for logger in (file_logging_app.logger, logging.getLogger())
        for handler in logger.handlers
        if getattr(handler, "baseFilename", "").endswith("error.log")
    }
    assert len(error_handlers) == 1

    for handler in error_handlers:
        handler.flush()
    content = (tmp_path / "logs" / "error.log").read_text(encoding="utf-8")
    assert content.count("wallet-marker") == 1


def test_summarize_counts_levels_per_day(tmp_path):
    (tmp_path / "app.log").write_text(
        "2024-05-01 10:00:00,000 [INFO] in postService: Post created\n"
        "2024-05-01 10:01:00,000 [WARNING] in postService: not the owner\n"
        "2024-05-02 09:00:00,000 [ERROR] in postController: boom\n"
        "garbage line\n",
        encoding="utf-8",
    )
    (tmp_path / "access.log").write_text("2024-05-01 10:00:00,000 - 127.0.0.1 GET /\n")

    summary = summarize_log_dir(str(tmp_path), days=7, now=datetime.now())

    assert summary == {
        "2024-05-01": {"INFO": 1, "ERROR": 0, "WARNING": 1},
        "2024-05-02": {"INFO": 0, "ERROR": 1, "WARNING": 0},
    }
