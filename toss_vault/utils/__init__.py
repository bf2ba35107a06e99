"""Utility functions and configuration management."""

from toss_vault.utils.config import get_settings
from toss_vault.utils.logging import get_logger

__all__ = ["get_settings", "get_logger"]
