"""Utility functions."""
from .config_manager import ConfigManager, AppConfig
from .logger import setup_logging, get_logger

__all__ = [
    "ConfigManager", "AppConfig",
    "setup_logging", "get_logger",
]
