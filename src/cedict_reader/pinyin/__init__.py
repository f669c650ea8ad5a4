"""Pinyin micro-grammar: lexicon, atom decoder and word segmenter."""

from .lexicon import PINYIN_SOUNDS, PinyinLexicon
from .segmenter import segment_pinyin, segment_v1, segment_v2, split_v2_atoms
from .syllable import decode_atom

__all__ = [
    "PINYIN_SOUNDS",
    "PinyinLexicon",
    "decode_atom",
    "segment_pinyin",
    "segment_v1",
    "segment_v2",
    "split_v2_atoms",
]
