"""Typed failures raised while parsing one CC-CEDICT line.

Each error carries a short diagnostic ``tag`` and the offending ``line``. The
tag strings are stable and safe to match on; the message is ``"<tag>: <line>"``.
"""

from __future__ import annotations

COMMENT_LINE = "comment line"
EMPTY_LINE = "empty line"
PINYIN_BEFORE_TRADITIONAL = "found pinyin section before completing traditional section"
PINYIN_BEFORE_SIMPLIFIED = "found pinyin section before completing simplified section"
GLOSS_BEFORE_PINYIN = "found gloss section before pinyin section"
UNRECOGNIZED_VERSION = "malformed pinyin (unrecognized version)"
NO_TRADITIONAL_SIMPLIFIED = "no traditional/simplified found"
NO_PINYIN = "no pinyin found"
NO_GLOSS = "no gloss found"
MALFORMED_PINYIN = "malformed pinyin"
MALFORMED_PINYIN_NO_ATOM = "malformed pinyin (no atom)"
MALFORMED_PINYIN_V1 = "malformed pinyin v1"
MALFORMED_PINYIN_V2_DOTS = "malformed pinyin v2 - no dots"
NO_DIACRITICS = "malformed pinyin - no diacritics"
UNRECOGNIZED_PINYIN = "malformed pinyin - unrecognized pinyin value (check for ambiguity)"


def gloss_lead_in_tag(line: str) -> str:
    return f"failed to read gloss for line ({line})"


def version_mismatch_tag(open_count: int, close_count: int) -> str:
    return f"malformed pinyin (cannot determine version) ({open_count} {close_count})"


class CedictParseError(ValueError):
    """Base class for every line-level parse failure.

    Args:
        tag: Stable diagnostic tag for the failure.
        line: Offending input line; ``None`` while the error is still inside
            the pinyin decoder, before the line parser attaches it.
    """

    informational = False

    def __init__(self, tag: str, line: str | None = None) -> None:
        self.tag = tag
        self.line = line
        super().__init__(self._render())

    def _render(self) -> str:
        if self.line is None:
            return self.tag
        return f"{self.tag}: {self.line}"

    def with_line(self, line: str) -> CedictParseError:
        """Attach the offending line and return the same error instance."""

        self.line = line
        self.args = (self._render(),)
        return self


class SkippedLineError(CedictParseError):
    """Raised for comment and blank lines; callers usually just move on."""

    informational = True


class SectionOrderError(CedictParseError):
    """A bracket or slash arrived before the preceding section completed."""


class GlossLeadInError(CedictParseError):
    """Unexpected text between the closing pinyin bracket and the first slash."""


class PinyinVersionError(CedictParseError):
    """Bracket depth does not identify a known pinyin format version."""


class MissingSectionError(CedictParseError):
    """A required section of the record is empty."""


class MalformedPinyinError(CedictParseError):
    """A pinyin atom could not be decoded."""


class DiacriticPinyinError(CedictParseError):
    """The pinyin field contains precomposed tone-marked letters."""


class UnrecognizedPinyinError(CedictParseError):
    """A toned syllable is not a legal Mandarin sound."""
