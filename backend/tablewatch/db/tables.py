"""
Single source of truth for database tables that exist after migrations.

alembic/env.py checks the registered models against this list.
"""
# All tables that exist in the DB. Must match models and migrations.
ALL_TABLE_NAMES = ("watched_venues",)
