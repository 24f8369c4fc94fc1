"""Test configuration and fixtures."""

import os

# Fast bcrypt and test settings for everything below
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("AUTH__BCRYPT_ROUNDS", "4")
os.environ.setdefault("AUTH__JWT_SECRET", "test-secret-key-with-at-least-32-bytes")

import logfire  # noqa: E402

logfire.configure(send_to_logfire=False, console=False)
