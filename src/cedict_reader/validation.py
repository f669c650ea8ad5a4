"""Post-scan validators for parsed CC-CEDICT records."""

from __future__ import annotations

from typing import Sequence
import unicodedata

from cedict_reader.errors import (
    NO_DIACRITICS,
    NO_GLOSS,
    NO_PINYIN,
    NO_TRADITIONAL_SIMPLIFIED,
    UNRECOGNIZED_PINYIN,
    DiacriticPinyinError,
    MissingSectionError,
    UnrecognizedPinyinError,
)
from cedict_reader.models import PinyinWord, SyllableKind
from cedict_reader.pinyin.lexicon import PinyinLexicon


def validate_sections(
    traditional: str,
    simplified: str,
    pinyin_raw: str,
    pinyin: Sequence[PinyinWord],
    gloss: Sequence[str],
) -> None:
    """Require every section of the record to be present.

    Raises:
        MissingSectionError: If a headword, the pinyin, or the gloss is empty.
    """

    if not traditional or not simplified:
        raise MissingSectionError(NO_TRADITIONAL_SIMPLIFIED)
    if not pinyin_raw or not pinyin:
        raise MissingSectionError(NO_PINYIN)
    if not gloss:
        raise MissingSectionError(NO_GLOSS)


def validate_no_diacritics(pinyin_raw: str) -> None:
    """Reject precomposed letters such as ``ǎ`` in the pinyin field.

    Every character must equal its own NFD decomposition.

    Raises:
        DiacriticPinyinError: On the first precomposed character.
    """

    for char in pinyin_raw:
        if unicodedata.normalize("NFD", char) != char:
            raise DiacriticPinyinError(NO_DIACRITICS)


def validate_lexicon(pinyin: Sequence[PinyinWord], lexicon: PinyinLexicon) -> None:
    """Check that every toned syllable is a legal Mandarin sound.

    V2 splits are only made at digits, braces, and hyphens, so an unescaped
    ambiguous run such as ``eren2`` surfaces here as an illegal sound.

    Raises:
        UnrecognizedPinyinError: If a normal syllable is not in ``lexicon``.
    """

    for word in pinyin:
        for syllable in word:
            if syllable.kind is SyllableKind.NORMAL and not lexicon.contains(syllable.sound):
                raise UnrecognizedPinyinError(UNRECOGNIZED_PINYIN)
