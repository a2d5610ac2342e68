"""
Observability: structured logging and context management.

Provides:
- Contextual logging with session id and pairs file
- Log rotation and file management
- Third-party library log level control
"""

from infrastructure.observability.logging import (
    clear_pairs_file_context,
    configure_logging,
    get_log_context,
    make_session_tag,
    set_log_context,
)

__all__ = [
    "configure_logging",
    "set_log_context",
    "get_log_context",
    "clear_pairs_file_context",
    "make_session_tag",
]
