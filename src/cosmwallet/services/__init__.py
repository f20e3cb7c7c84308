"""
Services package - Process-level services for cosmwallet.

Contains:
- configure_logging: console and daily file logging
"""

from .logging import configure_logging, get_log_file_path, cleanup_old_logs

__all__ = [
    "configure_logging",
    "get_log_file_path",
    "cleanup_old_logs",
]
