"""Root conftest — shared test configuration."""

import os

# Tests never reach a real database or server
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("API_URL", "http://test")
os.environ.setdefault("LOG_FORMAT", "text")
