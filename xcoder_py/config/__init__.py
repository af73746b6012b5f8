"""Configuration management."""

from .global_config import GlobalConfig

__all__ = ["GlobalConfig"]
