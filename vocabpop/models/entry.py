"""Vocabulary entry models"""

from dataclasses import dataclass

from ..core.constants import DisplayConstants, VocabularyConstants


@dataclass(frozen=True)
class Entry:
    """One term/meaning vocabulary pair"""

    term: str
    meaning: str

    @property
    def body(self) -> str:
        """Notification body text.

        A plain meaning is returned unchanged. Extra tab-separated columns
        (reading, meaning, codes) are rendered as ``reading — meaning (codes)``.
        """
        if VocabularyConstants.FIELD_SEPARATOR not in self.meaning:
            return self.meaning

        columns = [
            c.strip() for c in self.meaning.split(VocabularyConstants.FIELD_SEPARATOR)
        ]
        reading = columns[0]
        meaning = columns[1] if len(columns) > 1 else ""
        codes = ", ".join(c for c in columns[2:] if c)

        body = reading
        if meaning:
            body = f"{body}{DisplayConstants.SEPARATOR}{meaning}" if body else meaning
        if codes:
            body += DisplayConstants.CODES_TEMPLATE.format(codes=codes)
        return body

    def __str__(self) -> str:
        return f"{self.term}{DisplayConstants.SEPARATOR}{self.body}"


@dataclass
class LoadStatistics:
    """Per-load counters, used for logging"""

    files_read: int = 0
    files_skipped: int = 0
    lines_skipped: int = 0
    entries_loaded: int = 0
