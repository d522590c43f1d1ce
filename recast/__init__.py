"""recast - republish RSS feeds with postdated items."""

__version__ = "1.0.0"
