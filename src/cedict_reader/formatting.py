"""Human-readable renderings of parsed entries for terminal output."""

from __future__ import annotations

from pypinyin.contrib.tone_convert import to_tone

from cedict_reader.models import Entry, PinyinWord, Syllable, SyllableKind, Tone


def format_entry(entry: Entry) -> str:
    """Render an entry as a single debugging line.

    Args:
        entry: Parsed record.

    Returns:
        Text such as ``Entry{traditional:"海嘯", ..., format_version:V1}``.
    """

    pinyin = ", ".join(word.numbered for word in entry.pinyin)
    gloss = ", ".join(entry.gloss)
    return (
        f'Entry{{traditional:"{entry.traditional}", simplified:"{entry.simplified}", '
        f'pinyin:[{pinyin}], pinyin_raw:"{entry.pinyin_raw}", gloss:[{gloss}], '
        f"format_version:{entry.format_version.value}}}"
    )


def tone_marked_syllable(syllable: Syllable) -> str:
    """Render one syllable with a tone diacritic in place of its digit.

    Only ``NORMAL`` syllables carry marks; the neutral tone is left bare.
    """

    if syllable.kind is not SyllableKind.NORMAL:
        return syllable.sound

    lowered = syllable.sound.lower()
    if syllable.tone is Tone.T5:
        marked = lowered.replace("v", "ü")
    else:
        marked = to_tone(f"{lowered}{int(syllable.tone)}")

    if syllable.sound[0].isupper():
        return marked[0].upper() + marked[1:]
    return marked


def tone_marked_word(word: PinyinWord) -> str:
    return "".join(tone_marked_syllable(syllable) for syllable in word)


def tone_marked(entry: Entry) -> str:
    """Render the entry's pinyin with diacritics, one space between words."""

    return " ".join(tone_marked_word(word) for word in entry.pinyin)
