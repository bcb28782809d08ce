"""Test environment: keep settings independent of any local .env or Postgres instance."""

import os

# Must run before app.core.config is imported (settings are built at import time).
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("APP_ENV", "dev")
