from __future__ import annotations

from app.taxonomy import TaxonomyProvider, get_default_taxonomy_provider

from .lexicon import (
    DIGITS_RE,
    EXCLUDE_TOKENS,
    GENERIC_SINGLE_WORDS,
    MAX_TOKEN_LENGTH,
    NOISE_BIGRAMS,
    NUMPLUS_RE,
    STOPWORDS,
    TECH_CHAR_RE,
    TLD_RE,
)
from .normalize import clean_edge_punct, normalize


def is_allowed_dot_token(token: str) -> bool:
    return token == ".net" or token.endswith(".js")


def is_noisy_token(token: str) -> bool:
    if not token:
        return True
    if token in STOPWORDS or token in EXCLUDE_TOKENS or token in GENERIC_SINGLE_WORDS:
        return True
    if len(token) > MAX_TOKEN_LENGTH:
        return True
    if NUMPLUS_RE.match(token):
        return True
    if TLD_RE.search(token):
        return True
    if "." in token:
        return not is_allowed_dot_token(token)
    if "+" in token and token != "c++":
        return True
    if DIGITS_RE.match(token):
        return True
    return False


def tokenize(text: str) -> list[str]:
    """Normalize ``text`` and return its keyword candidates in order, duplicates kept."""
    tokens: list[str] = []
    for piece in normalize(text).split(" "):
        token = clean_edge_punct(piece)
        if token and not is_noisy_token(token):
            tokens.append(token)
    return tokens


def is_technical(term: str, taxonomy: TaxonomyProvider | None = None) -> bool:
    provider = taxonomy or get_default_taxonomy_provider()
    return bool(TECH_CHAR_RE.search(term)) or provider.is_canonical(term)


def bigrams(tokens: list[str], taxonomy: TaxonomyProvider | None = None) -> list[str]:
    """Adjacent token pairs that look like skills (technical chars or a known synonym key)."""
    provider = taxonomy or get_default_taxonomy_provider()
    pairs: list[str] = []
    for left_raw, right_raw in zip(tokens, tokens[1:]):
        left = clean_edge_punct(left_raw)
        right = clean_edge_punct(right_raw)
        if not left or not right:
            continue
        if is_noisy_token(left) or is_noisy_token(right):
            continue
        pair = f"{left} {right}"
        skillish = (
            bool(TECH_CHAR_RE.search(pair))
            or provider.is_canonical(left)
            or provider.is_canonical(right)
        )
        if not skillish or pair in NOISE_BIGRAMS:
            continue
        pairs.append(pair)
    return pairs
