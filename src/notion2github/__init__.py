"""notion2github - Create GitHub issues from a Notion database CSV export."""

__version__ = "0.1.0"
