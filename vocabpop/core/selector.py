"""Entry selection: sequential cycling with an optional one-time shuffle"""

import random
from collections.abc import Iterator, Sequence

from ..exceptions import NoVocabularyFoundError
from ..logging_config import get_logger
from ..models.entry import Entry

logger = get_logger(__name__)


class EntrySelector:
    """Owns the vocabulary set and hands out entries in a fixed cyclic order"""

    def __init__(
        self,
        entries: Sequence[Entry],
        shuffle: bool = False,
        rng: random.Random | None = None,
    ):
        if not entries:
            raise NoVocabularyFoundError(reason="cannot select from an empty vocabulary set")

        self._entries = list(entries)
        if shuffle:
            (rng or random.Random()).shuffle(self._entries)
            logger.debug(f"Shuffled {len(self._entries)} entries")
        self._cursor = 0

    def next(self) -> Entry:
        """Return the entry under the cursor and advance, wrapping at the end"""
        entry = self._entries[self._cursor]
        self._cursor = (self._cursor + 1) % len(self._entries)
        return entry

    def __iter__(self) -> Iterator[Entry]:
        while True:
            yield self.next()

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def entries(self) -> tuple[Entry, ...]:
        """Entries in the order they will be shown"""
        return tuple(self._entries)
