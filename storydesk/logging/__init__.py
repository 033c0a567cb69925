"""
Logging configuration and utilities for the storydesk core.
"""
from .config import configure_logging, get_logger, get_matcher_logger, log_match_decision

__all__ = ["configure_logging", "get_logger", "get_matcher_logger", "log_match_decision"]
