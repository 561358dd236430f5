"""
Configuration module for the job board.

This package provides centralized configuration management with environment variable support.
"""

from .database import DatabaseConfig, get_db_config
from .settings import Config, get_config

__all__ = [
    "Config",
    "get_config",
    "DatabaseConfig",
    "get_db_config",
]
