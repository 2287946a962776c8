"""
Pytest configuration and fixtures.
"""

import os

# Set test environment before settings are first loaded
os.environ.setdefault("GOOGLE_AI_API_KEY", "test-key")
os.environ.setdefault("REDIS_URL", "redis://localhost:6379/15")
os.environ.setdefault("LOG_FORMAT", "console")
os.environ.setdefault("FRONTEND_URL", "https://admin.example.com")

from app.utils.logging import setup_logging  # noqa: E402

setup_logging("DEBUG", "console")
