import logging
import os
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Explicit mode set by configure_logging(); None means read LOG_MODE
_log_mode_override: Optional[str] = None


def _get_log_mode() -> str:
    """Get log mode from configuration."""
    if _log_mode_override is not None:
        return _log_mode_override

    from weglot_i18n.config import get_log_mode
    return get_log_mode()


def _levels_for(log_mode: str):
    """Return (logger_level, console_level) for a log mode."""
    if log_mode == 'debug':
        return logging.DEBUG, logging.DEBUG
    if log_mode == 'off':
        # Higher than CRITICAL disables everything
        return logging.CRITICAL + 1, logging.CRITICAL + 1
    return logging.INFO, logging.INFO


def _apply_mode(logger: logging.Logger, log_mode: str) -> None:
    logger_level, console_level = _levels_for(log_mode)
    logger.setLevel(logger_level)

    log_file = os.environ.get('LOG_FILE')
    has_file_handler = any(isinstance(h, logging.FileHandler) for h in logger.handlers)
    has_console_handler = any(
        isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
        for h in logger.handlers
    )
    log_format = logging.Formatter(LOG_FORMAT)

    if log_mode != 'off' and log_file and not has_file_handler:
        f_handler = logging.FileHandler(log_file, encoding='utf-8')
        f_handler.setLevel(logging.DEBUG)
        f_handler.setFormatter(log_format)
        logger.addHandler(f_handler)
    elif log_mode == 'off' and has_file_handler:
        for handler in [h for h in logger.handlers if isinstance(h, logging.FileHandler)]:
            handler.close()
            logger.removeHandler(handler)

    if not has_console_handler:
        c_handler = logging.StreamHandler()
        c_handler.setFormatter(log_format)
        logger.addHandler(c_handler)

    for handler in logger.handlers:
        if isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler):
            handler.setLevel(console_level)


def configure_logging(log_mode: str) -> None:
    """Set the log mode and update all loggers created by get_logger()."""
    global _log_mode_override
    _log_mode_override = log_mode

    for logger_name in list(logging.Logger.manager.loggerDict.keys()):
        if not logger_name.startswith('weglot_i18n'):
            continue
        logger = logging.getLogger(logger_name)
        if logger.handlers:
            _apply_mode(logger, log_mode)


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    _apply_mode(logger, _get_log_mode())
    return logger
