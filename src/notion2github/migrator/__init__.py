"""Migrator package - Sequences mapping, label and issue steps over records."""

from notion2github.migrator.migrator import Migrator, migrate_notion_to_github

__all__ = [
    "Migrator",
    "migrate_notion_to_github",
]
