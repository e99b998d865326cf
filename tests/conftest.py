"""Test-wide environment; must run before app settings are first loaded."""

import os

# Minimum bcrypt cost keeps password hashing fast in tests.
os.environ.setdefault("BCRYPT_ROUNDS", "4")
# The module-level engine is never used by tests; keep it off PostgreSQL.
os.environ.setdefault("DATABASE_URL", "sqlite://")
