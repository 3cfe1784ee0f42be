import functools
import os
import time

from loguru import logger as _log

from .constants import DEBUG_ENV, LOG_ENV

# ## === Logging setup ===
# Controlled via env (no CLI flags):
#   FILESPLITTER_LOG    -> path to log file (unset: no file log)
#   FILESPLITTER_DEBUG  -> when set to a truthy value, enables DEBUG (else INFO)
# Console UX is handled by ansi.py; loguru records go to the file only.
# Records from this package stay silent until init_logger() runs; importing it
# as a library leaves the host's sinks alone.
_log.disable("filesplitter")


def env_truthy(name: str, default: bool = False) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def init_logger() -> None:
    _log.remove()
    _log.enable("filesplitter")
    log_path = os.environ.get(LOG_ENV)
    if not log_path:
        return
    level = "DEBUG" if env_truthy(DEBUG_ENV, False) else "INFO"
    _log.add(log_path, level=level, rotation="1 MB", retention=3, enqueue=False, backtrace=False, diagnose=False)
    _log.info("Logger initialized at {} with level {}", log_path, level)


def log_info(msg: str) -> None:
    _log.info(msg)


def log_debug(msg: str) -> None:
    _log.debug(msg)


def log_error(msg: str) -> None:
    _log.error(msg)


def log_timing(fn):
    """Log the wall time of each call to ``fn`` at DEBUG level."""
    @functools.wraps(fn)
    def _timed(*args, **kwargs):
        started = time.perf_counter()
        try:
            return fn(*args, **kwargs)
        finally:
            elapsed_ms = (time.perf_counter() - started) * 1000.0
            log_debug(f"{fn.__name__} took {elapsed_ms:.1f} ms")
    return _timed
