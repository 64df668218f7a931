import logging
import logging.handlers
import os

from schemabridge import config

__all__ = ["setup_logger"]

_CONSOLE_FORMAT = "%(name)s - %(levelname)s - %(message)s"
_FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_FRAMEWORK_PREFIXES = (
    "uvicorn",   # ASGI server
    "watchfiles" # Dev auto-reloader
)


def _level(value: str, default: int) -> int:
    return getattr(logging, str(value).upper(), default)


def _file_filter(record: logging.LogRecord) -> bool:
    """Skip framework loggers in app.log; let everything else through."""
    return not record.name.startswith(_FRAMEWORK_PREFIXES)


# ---------------------------------------------------------------------------
# Root logger configuration (one-time) – idempotent
# ---------------------------------------------------------------------------

def _configure_root_logger() -> None:
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    log_cfg = config.get("logging", {})
    lvl_cfg = log_cfg.get("level", {})

    # ---------- Console handler ----------
    if not any(type(h) is logging.StreamHandler for h in root.handlers):
        console = logging.StreamHandler()
        console.setLevel(_level(lvl_cfg.get("console", "INFO"), logging.INFO))
        console.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
        root.addHandler(console)

    # ---------- Rotating file handler (<logs>/app.log) ----------
    logs_dir = config.get("base_dirs", {}).get("logs", "logs")
    os.makedirs(logs_dir, exist_ok=True)
    log_file = os.path.join(logs_dir, "app.log")

    if any(getattr(h, "baseFilename", "") == log_file for h in root.handlers):
        return

    rotation = log_cfg.get("rotation", {})
    file_handler = logging.handlers.RotatingFileHandler(
        log_file,
        mode="a",
        maxBytes=rotation.get("max_bytes", 10 * 1024 * 1024),
        backupCount=rotation.get("backup_count", 5),
        encoding=rotation.get("encoding", "utf-8"),
    )
    file_handler.setLevel(_level(lvl_cfg.get("file", "DEBUG"), logging.DEBUG))
    file_handler.setFormatter(logging.Formatter(_FILE_FORMAT))
    file_handler.addFilter(_file_filter)
    root.addHandler(file_handler)


# ---------------------------------------------------------------------------
# Public helper
# ---------------------------------------------------------------------------

def setup_logger(name: str) -> logging.Logger:
    """Return a named DEBUG-level logger wired to the shared root handlers."""
    _configure_root_logger()

    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)
    return logger
