"""Test configuration and fixtures."""

import os

# Settings are read from the environment, so these must be set before any
# specdit module builds one. bcrypt's minimum cost keeps tests fast.
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("AUTH__BCRYPT_ROUNDS", "4")
os.environ.setdefault("AUTH__JWT_SECRET", "test-secret")
os.environ.setdefault("HASHIDS__SALT", "test-salt")

import logfire  # noqa: E402

logfire.configure(send_to_logfire=False, console=False)
