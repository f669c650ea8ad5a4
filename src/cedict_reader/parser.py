"""Line parser for CC-CEDICT records.

A record has the shape::

    Traditional Simplified [pin1 yin1] /gloss/gloss/
    Traditional Simplified [[pin1yin1]] /gloss/gloss/

The scanner walks the line once, left to right, through six sections and
counts the outer brackets. The bracket depth (one or two) selects the V1 or V2
pinyin encoding once the whole line has been consumed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
import logging
from typing import Iterable, Iterator

from cedict_reader.errors import (
    COMMENT_LINE,
    EMPTY_LINE,
    GLOSS_BEFORE_PINYIN,
    PINYIN_BEFORE_SIMPLIFIED,
    PINYIN_BEFORE_TRADITIONAL,
    UNRECOGNIZED_VERSION,
    CedictParseError,
    GlossLeadInError,
    PinyinVersionError,
    SectionOrderError,
    SkippedLineError,
    gloss_lead_in_tag,
    version_mismatch_tag,
)
from cedict_reader.models import Entry, FormatVersion
from cedict_reader.pinyin.lexicon import PinyinLexicon
from cedict_reader.pinyin.segmenter import segment_pinyin
from cedict_reader.validation import validate_lexicon, validate_no_diacritics, validate_sections

logger = logging.getLogger(__name__)

HEADWORD_DELIMITER = " "
PINYIN_START = "["
PINYIN_END = "]"
GLOSS_DELIMITER = "/"
COMMENT_PREFIX = "#"

_VERSIONS_BY_DEPTH = {1: FormatVersion.V1, 2: FormatVersion.V2}


class Section(Enum):
    """Scanner position within a record."""

    TRADITIONAL = "traditional"
    SIMPLIFIED = "simplified"
    TRANSITION_IN_PINYIN = "transition_in_pinyin"
    PINYIN = "pinyin"
    TRANSITION_OUT_PINYIN = "transition_out_pinyin"
    GLOSS = "gloss"


@dataclass(frozen=True)
class ScannedLine:
    """Raw sections collected by :func:`scan_line` before pinyin decoding."""

    traditional: str
    simplified: str
    pinyin_raw: str
    gloss: tuple[str, ...]
    open_brackets: int
    close_brackets: int


def scan_line(line: str) -> ScannedLine:
    """Split one record into its raw sections.

    Args:
        line: Record text without the trailing newline.

    Returns:
        Collected section text and outer bracket counts.

    Raises:
        SectionOrderError: If a bracket or slash appears too early.
        GlossLeadInError: If anything but ``]`` or spaces sits between the
            pinyin and the first gloss slash.
    """

    traditional = ""
    simplified = ""
    pinyin_raw = ""
    gloss: list[str] = []
    open_brackets = 0
    close_brackets = 0

    buf: list[str] = []
    section = Section.TRADITIONAL

    for index, char in enumerate(line):
        if section is Section.TRADITIONAL:
            if char == PINYIN_START:
                raise SectionOrderError(PINYIN_BEFORE_TRADITIONAL)
            if char == HEADWORD_DELIMITER:
                traditional = "".join(buf)
                buf.clear()
                section = Section.SIMPLIFIED
            else:
                buf.append(char)

        elif section is Section.SIMPLIFIED:
            if char == PINYIN_START:
                raise SectionOrderError(PINYIN_BEFORE_SIMPLIFIED)
            if char == HEADWORD_DELIMITER:
                simplified = "".join(buf)
                buf.clear()
                section = Section.TRANSITION_IN_PINYIN
            else:
                buf.append(char)

        elif section is Section.TRANSITION_IN_PINYIN:
            if char == GLOSS_DELIMITER:
                raise SectionOrderError(GLOSS_BEFORE_PINYIN)
            if char == PINYIN_START:
                open_brackets += 1
                next_index = index + 1
                if next_index < len(line) and line[next_index] != PINYIN_START:
                    section = Section.PINYIN

        elif section is Section.PINYIN:
            if char == PINYIN_END:
                close_brackets += 1
                pinyin_raw = "".join(buf)
                buf.clear()
                section = Section.TRANSITION_OUT_PINYIN
            else:
                buf.append(char)

        elif section is Section.TRANSITION_OUT_PINYIN:
            if char == PINYIN_END:
                close_brackets += 1
            elif char == HEADWORD_DELIMITER:
                continue
            elif char == GLOSS_DELIMITER:
                section = Section.GLOSS
            else:
                raise GlossLeadInError(gloss_lead_in_tag(line))

        elif char == GLOSS_DELIMITER:
            # Section.GLOSS
            gloss.append("".join(buf))
            buf.clear()
        else:
            buf.append(char)

    return ScannedLine(
        traditional=traditional,
        simplified=simplified,
        pinyin_raw=pinyin_raw,
        gloss=tuple(gloss),
        open_brackets=open_brackets,
        close_brackets=close_brackets,
    )


def detect_version(open_brackets: int, close_brackets: int) -> FormatVersion:
    """Map the outer bracket depth to a pinyin format version.

    Raises:
        PinyinVersionError: If the counts differ or the depth is not 1 or 2.
    """

    if open_brackets != close_brackets:
        raise PinyinVersionError(version_mismatch_tag(open_brackets, close_brackets))
    version = _VERSIONS_BY_DEPTH.get(open_brackets)
    if version is None:
        raise PinyinVersionError(UNRECOGNIZED_VERSION)
    return version


@dataclass(frozen=True)
class LineError:
    """A failed line captured by :meth:`LineParser.parse_lines`."""

    line_number: int
    error: CedictParseError


@dataclass(frozen=True)
class ParseResult:
    """Outcome of parsing a stream of lines.

    Attributes:
        entries: Successfully parsed records in input order.
        errors: Failures for non-comment, non-blank lines.
        skipped: Number of comment and blank lines passed over.
    """

    entries: tuple[Entry, ...] = field(default_factory=tuple)
    errors: tuple[LineError, ...] = field(default_factory=tuple)
    skipped: int = 0


@dataclass(frozen=True)
class LineParser:
    """Reusable parser handle sharing one frozen pinyin lexicon.

    The handle holds no per-call state, so one instance can serve many
    threads.
    """

    lexicon: PinyinLexicon = field(default_factory=PinyinLexicon)

    def parse(self, line: str) -> Entry:
        """Parse one CC-CEDICT record.

        Args:
            line: Record text; a trailing newline is ignored.

        Returns:
            The parsed entry.

        Raises:
            SkippedLineError: For comment and whitespace-only lines.
            CedictParseError: For any malformed record; the error carries the
                offending line.
        """

        line = line.rstrip("\r\n")
        try:
            return self._parse(line)
        except CedictParseError as error:
            error.with_line(line)
            raise

    def _parse(self, line: str) -> Entry:
        if line.startswith(COMMENT_PREFIX):
            raise SkippedLineError(COMMENT_LINE)
        if not line.strip():
            raise SkippedLineError(EMPTY_LINE)

        scanned = scan_line(line)
        version = detect_version(scanned.open_brackets, scanned.close_brackets)
        validate_no_diacritics(scanned.pinyin_raw)
        pinyin = segment_pinyin(scanned.pinyin_raw, version)

        validate_sections(
            scanned.traditional,
            scanned.simplified,
            scanned.pinyin_raw,
            pinyin,
            scanned.gloss,
        )
        validate_lexicon(pinyin, self.lexicon)

        return Entry(
            traditional=scanned.traditional,
            simplified=scanned.simplified,
            pinyin=pinyin,
            pinyin_raw=scanned.pinyin_raw,
            gloss=scanned.gloss,
            format_version=version,
        )

    def parse_lines(self, lines: Iterable[str]) -> ParseResult:
        """Parse a stream of lines, collecting failures instead of raising.

        Args:
            lines: Raw dictionary lines, e.g. an open text file.

        Returns:
            ``ParseResult`` with entries, per-line errors, and the skip count.
        """

        entries: list[Entry] = []
        errors: list[LineError] = []
        skipped = 0

        for line_number, line in enumerate(lines, start=1):
            try:
                entries.append(self.parse(line))
            except SkippedLineError:
                skipped += 1
            except CedictParseError as error:
                logger.debug("line %d: %s", line_number, error)
                errors.append(LineError(line_number=line_number, error=error))

        return ParseResult(entries=tuple(entries), errors=tuple(errors), skipped=skipped)

    def iter_entries(self, lines: Iterable[str]) -> Iterator[Entry]:
        """Yield entries for every line that parses, skipping the rest."""

        for line_number, line in enumerate(lines, start=1):
            try:
                yield self.parse(line)
            except SkippedLineError:
                continue
            except CedictParseError as error:
                logger.debug("line %d: %s", line_number, error)


def new_parser(lexicon: PinyinLexicon | None = None) -> LineParser:
    """Build a reusable parser handle."""

    if lexicon is None:
        return LineParser()
    return LineParser(lexicon=lexicon)


def parse_line(line: str) -> Entry:
    """Parse one record with a freshly built lexicon.

    Convenience wrapper around :meth:`LineParser.parse`; callers parsing many
    lines should hold a handle from :func:`new_parser` instead.
    """

    return LineParser().parse(line)
