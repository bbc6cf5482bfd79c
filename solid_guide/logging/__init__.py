"""
Logging configuration and utilities for the SOLID guide tooling.
"""
from .config import configure_logging, get_logger, log_check_result

__all__ = ["configure_logging", "get_logger", "log_check_result"]
