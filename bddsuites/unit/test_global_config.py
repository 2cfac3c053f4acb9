from loguru import logger

from bdd_tools.common import get_logger, init_logger, reset_logger


def test_log_file_sink(monkeypatch, tmp_path):
    log_file = tmp_path / "logs" / "suite.log"
    monkeypatch.setenv("LOG_FILE", str(log_file))
    monkeypatch.setenv("LOG_LEVEL", "debug")

    reset_logger()
    try:
        init_logger()
        get_logger().info("Scenario Started : Login")
        assert "Scenario Started : Login" in log_file.read_text(encoding="utf-8")
    finally:
        monkeypatch.delenv("LOG_FILE")
        monkeypatch.delenv("LOG_LEVEL")
        reset_logger()
        init_logger()


def test_init_logger_runs_once(monkeypatch, tmp_path):
    log_file = tmp_path / "second.log"
    init_logger()
    monkeypatch.setenv("LOG_FILE", str(log_file))

    init_logger()
    logger.info("not written")

    assert not log_file.exists()
