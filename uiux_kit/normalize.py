from __future__ import annotations

"""
Text normalization utilities used across the UI/UX kit recommender.

Every row of every dataset and every incoming query passes through the
same pipeline here (unicode canonicalisation, lower-casing, character
filtering, whitespace collapsing) before it is tokenised for BM25.
Keeping the logic in one place guarantees that indexed documents and
queries agree on what a term is.
"""

import re
import unicodedata
from typing import List, Mapping

from .config import MAX_QUERY_CHARS


# ---------------------------
# Basic helpers
# ---------------------------

def clamp_text_length(text: str, max_chars: int = MAX_QUERY_CHARS) -> str:
    """
    Hard cap on query size so a pasted document can't blow up scoring.
    """
    if not isinstance(text, str):
        text = str(text)
    if len(text) <= max_chars:
        return text
    return text[:max_chars]


def normalize_unicode(text: str) -> str:
    """
    Compose decomposed accents (e.g. ``e`` + combining acute) into a
    single code point so they survive the character filter below.
    """
    if not text:
        return ""
    return unicodedata.normalize("NFC", text)


def normalize_whitespace(text: str) -> str:
    """
    Collapse all whitespace runs into a single space and strip edges.
    """
    if not text:
        return ""
    return re.sub(r"\s+", " ", text).strip()


# ---------------------------
# Tokenization
# ---------------------------

# Keep ASCII letters/digits, Latin-1 through Vietnamese accented letters
# and whitespace.  Everything else becomes a separator.
NON_TERM_RE = re.compile(r"[^a-z0-9\u00c0-\u1ef9\s]")


def normalize_text(text) -> str:
    """
    Pipeline shared by documents and queries:

    - unicode NFC
    - lowercase
    - replace non-term characters with spaces
    - collapse whitespace
    """
    if text is None:
        return ""
    text = normalize_unicode(str(text)).lower()
    text = NON_TERM_RE.sub(" ", text)
    return normalize_whitespace(text)


def tokenize(text) -> List[str]:
    """
    Return the BM25 token list for ``text``.  Empty input yields ``[]``.
    """
    normalized = normalize_text(text)
    if not normalized:
        return []
    return normalized.split(" ")


def normalize_query(text) -> str:
    """Clamp and normalize a raw user query."""
    if text is None:
        return ""
    return normalize_text(clamp_text_length(str(text)))


def combine_row_text(row: Mapping[str, object]) -> str:
    """
    Join every column value of a record into one blob for indexing.
    Column order is preserved; ``None`` values contribute nothing.
    """
    return " ".join("" if v is None else str(v) for v in row.values())


if __name__ == "__main__":
    sample = "Glassmorphism — Thiết kế màu sắc hiện đại! (React/Next.js)"
    print("RAW:", sample)
    print("NORMALIZED:", normalize_text(sample))
    print("TOKENS:", tokenize(sample))
