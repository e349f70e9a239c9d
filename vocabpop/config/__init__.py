"""Configuration module for the VocabPop application"""

from .settings import (
    AppSettings,
    LoggingSettings,
    NotifierSettings,
    RunConfig,
    VocabularySettings,
    settings,
)

__all__ = [
    "AppSettings",
    "VocabularySettings",
    "NotifierSettings",
    "LoggingSettings",
    "RunConfig",
    "settings",
]
