import json
import logging
import os
from logging.handlers import RotatingFileHandler


class JsonLogFormatter(logging.Formatter):
    def format(self, record):
        payload = {
            "timestamp": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "logger": record.name,
            "level": record.levelname,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True)


def _resolve_logs_dir(log_dir=None) -> str:
    candidate = str(log_dir or os.getenv("PK_LOG_DIR", "logs") or "").strip()
    return candidate or "logs"


def _use_json(json_log=None) -> bool:
    if json_log is not None:
        return bool(json_log)
    return os.getenv("PK_JSON_LOG", "0").strip().lower() in {"1", "true", "yes"}


def _ensure_root_log_handler(formatter: logging.Formatter, level, logs_dir: str) -> None:
    root = logging.getLogger()
    root.setLevel(level)
    for handler in list(root.handlers):
        if bool(getattr(handler, "_paramkit_root_file_handler", False)):
            return

    os.makedirs(logs_dir, exist_ok=True)
    root_file_handler = RotatingFileHandler(
        os.path.join(logs_dir, "paramkit.log"),
        maxBytes=10 * 1024 * 1024,
        backupCount=5,
    )
    root_file_handler.setFormatter(formatter)
    root_file_handler._paramkit_root_file_handler = True
    root.addHandler(root_file_handler)


def setup_logging(name="paramkit", level=None, log_dir=None, json_log=None):
    """Sets up a logger with a StreamHandler and FileHandler."""
    logger = logging.getLogger(name)
    effective_level = str(level or "INFO").upper()
    logger.setLevel(effective_level)
    logger.propagate = False

    # Prevent duplicate handlers when setup_logging is called multiple times.
    if logger.handlers:
        return logger

    plain_formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    formatter = JsonLogFormatter() if _use_json(json_log) else plain_formatter
    logs_dir = _resolve_logs_dir(log_dir)
    _ensure_root_log_handler(formatter, effective_level, logs_dir)

    # Console Handler
    ch = logging.StreamHandler()
    ch.setFormatter(formatter)
    logger.addHandler(ch)

    # File Handler (Rotating: 10MB limit, 5 backups)
    os.makedirs(logs_dir, exist_ok=True)
    fh = RotatingFileHandler(
        os.path.join(logs_dir, f"{name}.log"),
        maxBytes=10 * 1024 * 1024,
        backupCount=5,
    )
    fh.setFormatter(formatter)
    logger.addHandler(fh)

    return logger
