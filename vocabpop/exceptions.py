"""Custom exceptions for the VocabPop application"""

from pathlib import Path
from typing import Any


class VocabPopError(Exception):
    """Base exception class for all application errors"""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (Details: {self.details})"
        return self.message


class NoVocabularyFoundError(VocabPopError):
    """Raised when loading produced zero valid entries"""

    def __init__(self, directory: Path | str | None = None, reason: str | None = None):
        location = f" in '{directory}'" if directory is not None else ""
        hint = (
            f": {reason}"
            if reason
            else ". Create tab-separated text files (term<TAB>meaning) under that directory."
        )
        super().__init__(f"No vocabulary entries found{location}{hint}")
        self.directory = Path(directory) if directory is not None else None
        self.reason = reason


class NotificationError(VocabPopError):
    """Raised when a notification backend fails to display an entry"""

    def __init__(self, backend: str, original_error: Exception | None = None):
        super().__init__(
            f"Notification backend '{backend}' failed",
            {
                "backend": backend,
                "original_error": str(original_error) if original_error else None,
            },
        )
        self.backend = backend
        self.original_error = original_error


class ConfigurationError(VocabPopError):
    """Raised when configuration is invalid or missing"""

    def __init__(self, setting: str, value: Any, reason: str):
        super().__init__(
            f"Invalid configuration for '{setting}': {reason}",
            {"setting": setting, "value": value, "reason": reason},
        )
        self.setting = setting
        self.value = value
        self.reason = reason
