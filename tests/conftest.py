"""Root conftest - shared test configuration."""

import os

# Ensure tests never reach a real database, auth provider or bucket
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("AUTH_URL", "https://auth.test")
os.environ.setdefault("AUTH_ANON_KEY", "anon-test-key")
os.environ.setdefault("LOG_FORMAT", "text")
