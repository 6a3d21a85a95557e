from __future__ import annotations

import re

_DASH_RE = re.compile("[‐-―−⸺⸻﹘﹣－]")
_DISALLOWED_RE = re.compile(r"[^a-z0-9+.#/\- ]")
_LETTER_DIGIT_RE = re.compile(r"([a-z])(\d)")
_DIGIT_LETTER_RE = re.compile(r"(\d)([a-z])")
_SPACES_RE = re.compile(r" +")

EDGE_PUNCT = ".,;:()"
_LEADING_DOT_TERMS = frozenset({".net"})


def normalize(text: str) -> str:
    """Canonicalize free text into the lexical form every matcher works on.

    Lowercases, folds dash glyphs to ``-``, keeps only ``[a-z0-9+.#/-]`` and
    spaces, splits letter/digit runs (``python3`` -> ``python 3``) and
    collapses whitespace. ``normalize(normalize(s)) == normalize(s)``.
    """
    if not text:
        return ""
    lowered = _DASH_RE.sub("-", text.lower())
    kept = _DISALLOWED_RE.sub(" ", lowered)
    split = _DIGIT_LETTER_RE.sub(r"\1 \2", _LETTER_DIGIT_RE.sub(r"\1 \2", kept))
    return _SPACES_RE.sub(" ", split).strip()


def clean_edge_punct(token: str) -> str:
    """Strip edge punctuation; inner dots survive (``node.js``) and so does ``.net``."""
    trimmed = token.rstrip(EDGE_PUNCT)
    if trimmed in _LEADING_DOT_TERMS:
        return trimmed
    return trimmed.lstrip(EDGE_PUNCT)
