"""Split a bracketed pinyin field into words and decoded syllables.

V1 fields hold one atom per space-separated word (``hai3 xiao4``). V2 fields
concatenate the syllables of a word (``zen3me5 hui2shi4``) and split them on
tone digits, hyphens, and brace-escaped letter runs such as ``{e}ren2``.
"""

from __future__ import annotations

from cedict_reader.errors import (
    MALFORMED_PINYIN_NO_ATOM,
    MALFORMED_PINYIN_V2_DOTS,
    MalformedPinyinError,
)
from cedict_reader.models import FormatVersion, PinyinWord
from cedict_reader.pinyin.syllable import decode_atom

WORD_SEPARATOR = " "
V2_HYPHEN = "-"
MIDDLE_DOT = "·"
ASCII_DIGITS = frozenset("0123456789")


def segment_v1(payload: str) -> tuple[PinyinWord, ...]:
    """Decode a V1 payload where every space-separated token is one syllable."""

    return tuple(
        PinyinWord(syllables=(decode_atom(token),))
        for token in payload.split(WORD_SEPARATOR)
    )


def _clean_v2_atom(raw: str) -> str:
    if len(raw) >= 2 and raw.startswith("{") and raw.endswith("}"):
        cleaned = raw[1:-1]
    elif raw.endswith(V2_HYPHEN):
        cleaned = raw[:-1]
    else:
        cleaned = raw
    # Punctuation such as a lone hyphen or full-width comma is kept verbatim.
    return cleaned or raw


def split_v2_atoms(word: str) -> list[str]:
    """Split one V2 word into raw atoms.

    A split happens after an ASCII digit (the tone belongs to the atom), after
    a ``}`` closing an earlier ``{``, and after a hyphen. Whatever is left at
    the end of the word, such as a rhotic ``r`` or a bare letter ``Q``,
    becomes the final atom.

    Args:
        word: One space-free clump from a V2 pinyin field.

    Returns:
        Ordered atom strings ready for :func:`decode_atom`.
    """

    atoms: list[str] = []
    buf: list[str] = []
    brace_open = False

    def flush_buffer() -> None:
        if buf:
            atoms.append(_clean_v2_atom("".join(buf)))
            buf.clear()

    for ch in word:
        buf.append(ch)
        if ch == "{":
            brace_open = True
        if ch in ASCII_DIGITS or (brace_open and ch == "}") or ch == V2_HYPHEN:
            flush_buffer()
            brace_open = False

    flush_buffer()
    return atoms


def segment_v2(payload: str) -> tuple[PinyinWord, ...]:
    """Decode a V2 payload into multi-syllable words.

    Raises:
        MalformedPinyinError: If a word is empty, an atom is malformed, or a
            middle dot appears inside the pinyin clump.
    """

    words: list[PinyinWord] = []
    for word in payload.split(WORD_SEPARATOR):
        atoms = split_v2_atoms(word)
        if not atoms:
            raise MalformedPinyinError(MALFORMED_PINYIN_NO_ATOM)

        syllables = []
        for atom in atoms:
            syllable = decode_atom(atom)
            if syllable.sound == MIDDLE_DOT:
                raise MalformedPinyinError(MALFORMED_PINYIN_V2_DOTS)
            syllables.append(syllable)
        words.append(PinyinWord(syllables=tuple(syllables)))

    return tuple(words)


def segment_pinyin(payload: str, version: FormatVersion) -> tuple[PinyinWord, ...]:
    """Dispatch ``payload`` to the segmenter for ``version``.

    An empty payload yields no words; the line validators report it.
    """

    if not payload:
        return ()
    if version is FormatVersion.V1:
        return segment_v1(payload)
    return segment_v2(payload)
