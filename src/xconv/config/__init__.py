"""
Configuration Module

Provides configuration management using Pydantic Settings.
Supports environment variables and an optional .env file.
"""

from xconv.config.settings import Settings

__all__ = ["Settings"]
