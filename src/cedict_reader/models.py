"""Data models produced by the CC-CEDICT line parser.

Every parse call returns a fresh immutable ``Entry``. Sequences are stored as
tuples so entries can be compared, hashed, and shared between threads.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Iterator


class Tone(IntEnum):
    """Tone digit attached to a pinyin syllable; ``NONE`` when absent."""

    NONE = 0
    T1 = 1
    T2 = 2
    T3 = 3
    T4 = 4
    T5 = 5


class SyllableKind(Enum):
    """Classification of one decoded pinyin atom."""

    UNKNOWN = "unknown"
    NORMAL = "normal"
    ALPHABET = "alphabet"
    SPECIAL = "special"


class FormatVersion(str, Enum):
    """Pinyin encoding detected from the bracket depth of a record."""

    V1 = "V1"
    V2 = "V2"


@dataclass(frozen=True)
class Syllable:
    """One decoded pinyin atom.

    ``NORMAL`` syllables carry an ASCII sound found in the pinyin lexicon and a
    tone in ``T1..T5``. ``ALPHABET`` syllables are bare letters such as ``K``.
    ``UNKNOWN`` is reserved for the ``xx5`` placeholder reading, and
    ``SPECIAL`` covers punctuation kept inside the pinyin field.
    """

    sound: str
    tone: Tone
    kind: SyllableKind

    @property
    def numbered(self) -> str:
        """Return the sound followed by its tone digit, if any."""

        if self.tone is Tone.NONE:
            return self.sound
        return f"{self.sound}{int(self.tone)}"


@dataclass(frozen=True)
class PinyinWord:
    """Space-delimited clump of syllables from the pinyin field."""

    syllables: tuple[Syllable, ...]

    def __iter__(self) -> Iterator[Syllable]:
        return iter(self.syllables)

    def __len__(self) -> int:
        return len(self.syllables)

    @property
    def numbered(self) -> str:
        return "".join(syllable.numbered for syllable in self.syllables)


@dataclass(frozen=True)
class Entry:
    """One parsed CC-CEDICT record.

    ``pinyin_raw`` is the exact text found between the outer brackets and
    ``gloss`` keeps the slash-delimited definitions in source order.
    """

    traditional: str
    simplified: str
    pinyin: tuple[PinyinWord, ...]
    pinyin_raw: str
    gloss: tuple[str, ...]
    format_version: FormatVersion

    @property
    def pinyin_numbered(self) -> str:
        """Return the decoded pinyin as space-separated numbered words."""

        return " ".join(word.numbered for word in self.pinyin)

    @property
    def syllables(self) -> tuple[Syllable, ...]:
        """Flatten all words into one ordered syllable tuple."""

        return tuple(syllable for word in self.pinyin for syllable in word)
