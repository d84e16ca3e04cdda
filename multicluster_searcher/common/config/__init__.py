"""Unified searcher settings."""

from .settings import settings, SearcherSettings

__all__ = ["settings", "SearcherSettings"]
