"""Test package. Environment is set before any app module reads settings."""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET", "test-secret-key-that-is-at-least-32-bytes")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
