#!/usr/bin/env python3
"""Configuration for the booker API test suite

Configuration hierarchy:
- booker_config: target API, credentials, transport and test mode
- logging_config: logging configuration
"""
import os
from dotenv import load_dotenv
from .logging_config import LoggingConfig
from .booker_config import BookerConfig, DEFAULT_BASE_URL

# Local overrides (credentials, base URL) live in .env, never in source
env_file = os.getenv("BOOKER_ENV_FILE", ".env")
load_dotenv(env_file, override=False)

# Create global settings instance
settings = BookerConfig.from_env()

def get_settings() -> BookerConfig:
    """Get global settings instance"""
    return settings

def reload_settings() -> BookerConfig:
    """Reload settings from environment"""
    global settings
    settings = BookerConfig.from_env()
    return settings

__all__ = [
    'BookerConfig',
    'LoggingConfig',
    'DEFAULT_BASE_URL',
    'get_settings',
    'reload_settings',
    'settings',
]
