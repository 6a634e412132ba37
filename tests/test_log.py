import logging

from log import LOG_LEVEL_ENV_VAR, level_from_name, setup_logger


def _reset(name):
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


def test_handlers_added_once(tmp_path, monkeypatch):
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)
    name = "posture.test.once"
    try:
        logger = setup_logger(name, level=logging.DEBUG, log_dir=str(tmp_path), enable_file=True)
        setup_logger(name, level=logging.DEBUG, log_dir=str(tmp_path), enable_file=True)
        assert len(logger.handlers) == 2
        logger.info("hello")
        for handler in logger.handlers:
            handler.flush()
        assert "hello" in (tmp_path / f"{name}.log").read_text(encoding="utf-8")
    finally:
        _reset(name)


def test_env_var_overrides_level(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "warning")
    name = "posture.test.env"
    try:
        logger = setup_logger(name, level=logging.DEBUG, enable_console=False)
        assert logger.level == logging.WARNING
    finally:
        _reset(name)


def test_level_from_name():
    assert level_from_name("debug") == logging.DEBUG
    assert level_from_name("nonsense") == logging.INFO
