"""
git_ignore.logging – Logger naming, base configuration and IO tracing.
"""
from .helpers import JsonLogFormatter, get_logger, setup_base_logger, trace_io

__all__ = ["JsonLogFormatter", "get_logger", "setup_base_logger", "trace_io"]
