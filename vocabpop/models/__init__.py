"""Data models for the VocabPop application"""

from .entry import Entry, LoadStatistics

__all__ = ["Entry", "LoadStatistics"]
