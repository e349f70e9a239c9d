"""Vocabulary file loading and line parsing"""

from pathlib import Path

from ..exceptions import NoVocabularyFoundError
from ..logging_config import get_logger
from ..models.entry import Entry, LoadStatistics
from ..utils.error_handler import ErrorCollector
from .constants import VocabularyConstants

logger = get_logger(__name__)


def parse_line(line: str) -> tuple[str, str] | None:
    """Split a line on its first tab into ``(term, meaning)``.

    Only the line terminator is removed; the term and meaning are otherwise
    returned verbatim. Returns None when there is no tab or the term is empty.
    """
    line = line.rstrip("\r\n")
    term, sep, meaning = line.partition(VocabularyConstants.FIELD_SEPARATOR)
    if not sep or not term:
        return None
    return term, meaning


class VocabularyLoader:
    """Reads every regular file directly inside a directory into entries"""

    def __init__(self, directory: Path | str, comment_prefix: str | None = None):
        self.directory = Path(directory)
        self.comment_prefix = comment_prefix
        self.stats = LoadStatistics()
        self._problems = ErrorCollector()

    def list_files(self) -> list[Path]:
        """Regular files directly inside the directory, sorted by name"""
        if not self.directory.is_dir():
            logger.warning(f"Vocabulary directory not found: {self.directory}")
            return []
        return sorted(
            (p for p in self.directory.iterdir() if p.is_file()), key=lambda p: p.name
        )

    def load(self) -> list[Entry]:
        """Load all entries in deterministic file/line order.

        Raises:
            NoVocabularyFoundError: If no valid entry was parsed from any file
        """
        self.stats = LoadStatistics()
        self._problems.clear()

        entries: list[Entry] = []
        for path in self.list_files():
            entries.extend(self.load_file(path))

        if self._problems.has_warnings():
            logger.warning(self._problems.get_summary())
        self.stats.entries_loaded = len(entries)
        logger.debug(
            f"Loaded {len(entries)} entries from {self.stats.files_read} files "
            f"({self.stats.files_skipped} files skipped, "
            f"{self.stats.lines_skipped} lines skipped)"
        )

        if not entries:
            raise NoVocabularyFoundError(self.directory)
        return entries

    def load_file(self, path: Path) -> list[Entry]:
        """Parse one file; unreadable files yield no entries"""
        try:
            text = path.read_text(encoding=VocabularyConstants.FILE_ENCODING)
        except (OSError, UnicodeDecodeError) as e:
            self.stats.files_skipped += 1
            self._problems.add_warning(f"Skipping unreadable file {path}: {e}")
            return []

        self.stats.files_read += 1
        entries: list[Entry] = []
        for lineno, line in enumerate(text.split("\n"), 1):
            if not line.strip():
                continue
            if self.comment_prefix and line.startswith(self.comment_prefix):
                continue

            parsed = parse_line(line)
            if parsed is None:
                self.stats.lines_skipped += 1
                reason = (
                    "empty term"
                    if line.startswith(VocabularyConstants.FIELD_SEPARATOR)
                    else "missing tab separator"
                )
                self._problems.add_warning(
                    f"Skipping malformed line {path.name}:{lineno} ({reason})"
                )
                continue

            term, meaning = parsed
            entries.append(Entry(term=term, meaning=meaning))
        return entries

    @property
    def warnings(self) -> list[str]:
        return list(self._problems.warnings)


def load_vocabulary(directory: Path | str, comment_prefix: str | None = None) -> list[Entry]:
    """Convenience function to load every entry under a directory"""
    return VocabularyLoader(directory, comment_prefix=comment_prefix).load()
