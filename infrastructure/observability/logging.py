"""
Logging setup with contextvars-based metadata injection.

- Adds a session tag and the scored pairs file into every log line (via contextvars).
- Supports console-only logging OR console + rotating file logs.
- Tunes noisy third-party library loggers (httpx, httpcore).
"""

import contextvars
import hashlib
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Context variables for dynamic log metadata
cv_session_tag = contextvars.ContextVar("session_tag", default="-")
cv_pairs_file = contextvars.ContextVar("pairs_file", default="-")

# Kept for metadata, not printed every line
cv_session_id_full = contextvars.ContextVar("session_id_full", default="-")


def make_session_tag(session_id_full: str, length: int = 8) -> str:
    """
    Stable short tag derived from the full session id.
    Uses BLAKE2s; 8 hex chars is plenty for one process.
    """
    h = hashlib.blake2s(session_id_full.encode("utf-8"), digest_size=8).hexdigest()
    return h[:length]


class ContextInjectFilter(logging.Filter):
    """Inject context variables into log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.session = cv_session_tag.get() or "-"
        record.pairs_file = cv_pairs_file.get() or "-"
        return True


def set_log_context(
    *,
    session_id: str | None = None,
    pairs_file: str | None = None,
) -> None:
    """Update logging context (task-local via contextvars)."""
    if session_id is not None:
        cv_session_id_full.set(str(session_id))
        cv_session_tag.set(make_session_tag(str(session_id)))
    if pairs_file is not None:
        cv_pairs_file.set(str(pairs_file))


def get_log_context() -> dict[str, str]:
    """Return the current context in a convenient dict form (e.g. for JSON reports)."""
    return {
        "session_tag": str(cv_session_tag.get() or "-"),
        "session_id_full": str(cv_session_id_full.get() or "-"),
        "pairs_file": str(cv_pairs_file.get() or "-"),
    }


def clear_pairs_file_context() -> None:
    """Reset the pairs file to default (keep session info)."""
    cv_pairs_file.set("-")


def configure_logging(
    *,
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    max_bytes: int = 10_000_000,  # 10MB
    backup_count: int = 5,
) -> None:
    """
    Configure application logging with contextvars support.

    Args:
        log_file: Path to log file (None = console only)
        console_level: Minimum level for console output (default: INFO)
        file_level: Minimum level for file output (default: DEBUG)
        max_bytes: Max log file size before rotation
        backup_count: Number of backup files to keep
    """
    # Clear existing handlers to avoid duplicate logs if called multiple times
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.DEBUG)  # keep root permissive; handlers enforce levels

    console_fmt = "%(asctime)s [%(levelname)s] s=%(session)s f=%(pairs_file)s | %(message)s"
    file_fmt = "%(asctime)s [%(levelname)s] %(name)s | s=%(session)s f=%(pairs_file)s | %(message)s"

    ctx_filter = ContextInjectFilter()

    ch = logging.StreamHandler()
    ch.setLevel(console_level)
    ch.setFormatter(logging.Formatter(console_fmt, datefmt="%H:%M:%S"))
    ch.addFilter(ctx_filter)
    root.addHandler(ch)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        fh.setLevel(file_level)
        fh.setFormatter(logging.Formatter(file_fmt, datefmt="%Y-%m-%d %H:%M:%S"))
        fh.addFilter(ctx_filter)
        root.addHandler(fh)

    # Reduce noise from HTTP libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    logging.getLogger(__name__).info(
        "Logging configured (console_level=%s, file=%s)",
        logging.getLevelName(console_level),
        str(log_file) if log_file is not None else "None",
    )
