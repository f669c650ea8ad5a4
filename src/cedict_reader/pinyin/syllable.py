"""Decode one pinyin atom into a classified ``Syllable``."""

from __future__ import annotations

import re

from cedict_reader.errors import (
    MALFORMED_PINYIN,
    MALFORMED_PINYIN_NO_ATOM,
    MALFORMED_PINYIN_V1,
    MalformedPinyinError,
)
from cedict_reader.models import Syllable, SyllableKind, Tone

UNKNOWN_READING = "xx5"
TONE_DIGITS = "12345"
ALPHABETIC_RE = re.compile(r"[A-Za-z]+")
ASCII_DIGIT_RE = re.compile(r"[0-9]")


def decode_atom(atom: str) -> Syllable:
    """Decode one delimited pinyin atom such as ``ci2``, ``{e}`` or ``xx5``.

    The trailing tone digit is split off first, then CC-CEDICT's ``u:`` is
    rewritten to ``v`` before the sound is classified, so ``nu:3`` decodes as a
    normal ``nv`` syllable in tone 3.

    Args:
        atom: Raw atom text produced by the segmenter.

    Returns:
        The classified syllable.

    Raises:
        MalformedPinyinError: If the atom is empty or a bare tone digit, has
            unbalanced braces, or carries a digit inside a multi-character sound.
    """

    if not atom:
        raise MalformedPinyinError(MALFORMED_PINYIN_NO_ATOM)

    if atom == UNKNOWN_READING:
        return Syllable(sound="xx", tone=Tone.T5, kind=SyllableKind.UNKNOWN)

    tone = Tone.NONE
    sound = atom
    if atom[-1] in TONE_DIGITS:
        tone = Tone(int(atom[-1]))
        sound = atom[:-1]
        if not sound:
            raise MalformedPinyinError(MALFORMED_PINYIN_NO_ATOM)

    sound = sound.replace("u:", "v")

    opens = sound.startswith("{")
    closes = sound.endswith("}")
    if opens != closes:
        raise MalformedPinyinError(MALFORMED_PINYIN)
    if opens:
        sound = sound[1:-1]

    trimmed = sound[:-1] if sound.endswith("-") else sound
    if trimmed:
        sound = trimmed

    is_alphabetic = ALPHABETIC_RE.fullmatch(sound) is not None
    has_digit = ASCII_DIGIT_RE.search(sound) is not None
    if has_digit and len(sound) != 1:
        raise MalformedPinyinError(MALFORMED_PINYIN_V1)

    if is_alphabetic and tone is not Tone.NONE:
        kind = SyllableKind.NORMAL
    elif is_alphabetic:
        kind = SyllableKind.ALPHABET
    else:
        kind = SyllableKind.SPECIAL

    return Syllable(sound=sound, tone=tone, kind=kind)
