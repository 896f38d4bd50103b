"""Farm stand products catalog service."""
