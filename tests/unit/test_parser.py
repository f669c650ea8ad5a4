"""Unit tests for the CC-CEDICT line parser."""

from __future__ import annotations

import pytest

from cedict_reader.errors import (
    CedictParseError,
    DiacriticPinyinError,
    GlossLeadInError,
    MalformedPinyinError,
    MissingSectionError,
    PinyinVersionError,
    SectionOrderError,
    SkippedLineError,
    UnrecognizedPinyinError,
)
from cedict_reader.models import Entry, FormatVersion, PinyinWord, Syllable, SyllableKind, Tone
from cedict_reader.parser import LineParser, new_parser, parse_line, scan_line
from cedict_reader.pinyin.lexicon import PINYIN_SOUNDS, PinyinLexicon

MANY_GLOSS_LINE = (
    "浮泛 浮泛 [fu2 fan4] /to float about/(of a feeling) to show on the face/"
    "(of speech, friendship etc) shallow/vague/"
)


def _normal(sound: str, tone: Tone) -> Syllable:
    return Syllable(sound, tone, SyllableKind.NORMAL)


def test_parse_line_single_gloss_v1() -> None:
    entry = parse_line("海嘯 海啸 [hai3 xiao4] /tsunami/")

    assert entry == Entry(
        traditional="海嘯",
        simplified="海啸",
        pinyin=(
            PinyinWord((_normal("hai", Tone.T3),)),
            PinyinWord((_normal("xiao", Tone.T4),)),
        ),
        pinyin_raw="hai3 xiao4",
        gloss=("tsunami",),
        format_version=FormatVersion.V1,
    )


def test_parse_line_keeps_gloss_order() -> None:
    entry = parse_line(MANY_GLOSS_LINE)

    assert entry.format_version is FormatVersion.V1
    assert entry.gloss == (
        "to float about",
        "(of a feeling) to show on the face",
        "(of speech, friendship etc) shallow",
        "vague",
    )


def test_parse_line_allows_brackets_inside_gloss() -> None:
    entry = parse_line(
        "㗂 㗂 [sheng3] /variant of 省[sheng3]/tight-lipped/to examine/to watch/"
        "to scour (esp. Cantonese)/"
    )

    assert entry.gloss[0] == "variant of 省[sheng3]"
    assert len(entry.gloss) == 5


def test_parse_line_v2_umlaut_rewrite() -> None:
    entry = parse_line("打算 打算 [[nu:3]] /words/")

    assert entry.format_version is FormatVersion.V2
    assert entry.pinyin == (PinyinWord((_normal("nv", Tone.T3),)),)
    assert entry.pinyin_raw == "nu:3"


def test_parse_line_v2_multi_syllable_words() -> None:
    entry = parse_line("打算 打算 [[zen3me5 hui2shi4 r5]] /words/")

    assert entry.pinyin == (
        PinyinWord((_normal("zen", Tone.T3), _normal("me", Tone.T5))),
        PinyinWord((_normal("hui", Tone.T2), _normal("shi", Tone.T4))),
        PinyinWord((_normal("r", Tone.T5),)),
    )
    assert entry.pinyin_numbered == "zen3me5 hui2shi4 r5"


def test_parse_line_v2_bare_letter_word() -> None:
    entry = parse_line("3Q 3Q [[san1 Q]] /thx/")

    assert entry.pinyin == (
        PinyinWord((_normal("san", Tone.T1),)),
        PinyinWord((Syllable("Q", Tone.NONE, SyllableKind.ALPHABET),)),
    )


def test_parse_line_unknown_reading_sentinel() -> None:
    entry = parse_line("打算 打算 [xx5] /words/")

    assert entry.format_version is FormatVersion.V1
    assert entry.pinyin == (PinyinWord((Syllable("xx", Tone.T5, SyllableKind.UNKNOWN),)),)


@pytest.mark.parametrize(
    ("line", "numbered"),
    [
        ("K人 K人 [K ren2] /(slang) to hit sb; to beat sb/", "K ren2"),
        ("K人 K人 [[K ren2]] /(slang) to hit sb; to beat sb/", "K ren2"),
        ("打算 打算 [[xx5]] /words/", "xx5"),
        ("打算 打算 [[{e}ren2]] /words/", "eren2"),
        ("打算 打算 [[e-ren2]] /words/", "eren2"),
        ("打算 打算 [[yi4ren2]] /words/", "yi4ren2"),
        (
            "大衛·艾登堡 大卫·艾登堡 [[Da4wei4 Ai4deng1bao3]] /David Attenborough/",
            "Da4wei4 Ai4deng1bao3",
        ),
        (
            "分久必合，合久必分 分久必合，合久必分 [[fen1jiu3-bi4he2, he2jiu3-bi4fen1]] "
            "/lit. that which is long divided must unify (三國演義|三国演义[San1guo2 Yan3yi4])"
            "/fig. things are constantly changing/",
            "fen1jiu3-bi4he2, he2jiu3-bi4fen1",
        ),
    ],
)
def test_parse_line_accepts_corpus_variants(line: str, numbered: str) -> None:
    assert parse_line(line).pinyin_numbered == numbered


def test_parse_line_escaped_letter_stays_separate_syllable() -> None:
    entry = parse_line("e人 e人 [[{e}ren2]] /(slang) extroverted person/")

    assert [syllable.kind for syllable in entry.syllables] == [
        SyllableKind.ALPHABET,
        SyllableKind.NORMAL,
    ]


def test_parse_line_strips_trailing_newline() -> None:
    assert parse_line("海嘯 海啸 [hai3 xiao4] /tsunami/\r\n") == parse_line(
        "海嘯 海啸 [hai3 xiao4] /tsunami/"
    )


@pytest.mark.parametrize(
    ("line", "error_type", "tag"),
    [
        ("# CC-CEDICT comment", SkippedLineError, "comment line"),
        ("", SkippedLineError, "empty line"),
        ("   \t", SkippedLineError, "empty line"),
        (
            "浮泛[fu2 fan4] /to float about/",
            SectionOrderError,
            "found pinyin section before completing traditional section",
        ),
        (
            "浮泛 [fu2 fan4] /to float about/",
            SectionOrderError,
            "found pinyin section before completing simplified section",
        ),
        (
            "浮泛 浮泛 /to float about/vague/",
            SectionOrderError,
            "found gloss section before pinyin section",
        ),
        (
            "浮泛 浮泛 [[fu2 fan4] /to float about/",
            PinyinVersionError,
            "malformed pinyin (cannot determine version) (2 1)",
        ),
        (
            "浮泛 浮泛 [[[fu2 fan4]]] /to float about/",
            PinyinVersionError,
            "malformed pinyin (unrecognized version)",
        ),
        (" 浮泛 [fu2 fan4] /to float about/", MissingSectionError, "no traditional/simplified found"),
        ("浮泛 浮泛 [] /to float about/", MissingSectionError, "no pinyin found"),
        ("浮泛 浮泛 [fu2 fan4] ", MissingSectionError, "no gloss found"),
        ("打算 打算 [[{e ren2]] /words/", MalformedPinyinError, "malformed pinyin"),
        ("浮泛 浮泛 [fu2fan4] /to float about/", MalformedPinyinError, "malformed pinyin v1"),
        (
            "大衛·艾登堡 大卫·艾登堡 [[Da4wei4 · Ai4deng1bao3]] /David Attenborough/",
            MalformedPinyinError,
            "malformed pinyin v2 - no dots",
        ),
        (
            "海嘯 海啸 [h\u01cei xi\u00e0o] /tsunami/",
            DiacriticPinyinError,
            "malformed pinyin - no diacritics",
        ),
        ("3Q 3Q [[3Q]] /thx/", MalformedPinyinError, "malformed pinyin (no atom)"),
        ("一 一 [1] /one/", MalformedPinyinError, "malformed pinyin (no atom)"),
        (
            "好 好 [ni3h\u01ceo] /hello/",
            DiacriticPinyinError,
            "malformed pinyin - no diacritics",
        ),
        (
            "e人 e人 [[eren2]] /(slang) extroverted person/",
            UnrecognizedPinyinError,
            "malformed pinyin - unrecognized pinyin value (check for ambiguity)",
        ),
    ],
)
def test_parse_line_error_tags(line: str, error_type: type, tag: str) -> None:
    with pytest.raises(error_type) as excinfo:
        parse_line(line)

    assert excinfo.value.tag == tag
    assert excinfo.value.line == line


def test_parse_line_gloss_lead_in_error_names_line() -> None:
    line = "浮泛 浮泛 [fu2 fan4] x/to float about/"

    with pytest.raises(GlossLeadInError) as excinfo:
        parse_line(line)

    assert excinfo.value.tag == f"failed to read gloss for line ({line})"


def test_errors_are_value_errors_with_line_in_message() -> None:
    line = "浮泛 浮泛 [fu2fan4] /to float about/"

    with pytest.raises(ValueError, match="malformed pinyin v1") as excinfo:
        parse_line(line)

    assert isinstance(excinfo.value, CedictParseError)
    assert str(excinfo.value) == f"malformed pinyin v1: {line}"
    assert not excinfo.value.informational


def test_skipped_lines_are_informational() -> None:
    with pytest.raises(SkippedLineError) as excinfo:
        parse_line("# comment")

    assert excinfo.value.informational


def test_scan_line_collects_raw_sections() -> None:
    scanned = scan_line("打算 打算 [[zen3me5 r5]]  /a/b/")

    assert scanned.traditional == "打算"
    assert scanned.simplified == "打算"
    assert scanned.pinyin_raw == "zen3me5 r5"
    assert scanned.gloss == ("a", "b")
    assert (scanned.open_brackets, scanned.close_brackets) == (2, 2)


def test_scan_line_drops_text_after_last_slash() -> None:
    assert scan_line("a b [a1] /x/y").gloss == ("x",)


def test_new_parser_matches_stateless_parse() -> None:
    handle = new_parser()

    assert isinstance(handle, LineParser)
    assert handle.parse(MANY_GLOSS_LINE) == parse_line(MANY_GLOSS_LINE)
    assert handle.parse(MANY_GLOSS_LINE) == handle.parse(MANY_GLOSS_LINE)


def test_new_parser_uses_supplied_lexicon() -> None:
    handle = new_parser(PinyinLexicon(sounds=PINYIN_SOUNDS | {"eren"}))

    assert handle.parse("e人 e人 [[eren2]] /(slang) extroverted person/").pinyin_numbered == "eren2"


def test_parse_line_accepts_rare_lexicon_sound() -> None:
    entry = parse_line("𰻞 𰻞 [biang2] /(used in 𰻞𰻞麵|𰻞𰻞面[biang2 biang2 mian4])/")

    assert entry.pinyin == (PinyinWord((_normal("biang", Tone.T2),)),)
