from __future__ import annotations

import re
from collections import Counter

import numpy as np

_TOKEN_PATTERN = re.compile(r"[a-z0-9]+")


def _tokenize(text: str) -> list[str]:
    return _TOKEN_PATTERN.findall((text or "").lower())


def _term_frequencies(tokens: list[str], vocabulary: list[str]) -> np.ndarray:
    counts = Counter(tokens)
    total = len(tokens) or 1
    return np.array([counts[term] / total for term in vocabulary], dtype=float)


def tfidf_similarity(left: str, right: str) -> float:
    """Cosine similarity of TF-IDF vectors over the two-document corpus, in [0, 1]."""
    left_tokens = _tokenize(left)
    right_tokens = _tokenize(right)
    left_terms = set(left_tokens)
    right_terms = set(right_tokens)
    vocabulary = sorted(left_terms | right_terms)
    if not vocabulary:
        return 0.0

    document_frequency = np.array(
        [int(term in left_terms) + int(term in right_terms) for term in vocabulary],
        dtype=float,
    )
    corpus_size = 2
    idf = np.log((corpus_size + 1) / (document_frequency + 1)) + 1

    left_vector = _term_frequencies(left_tokens, vocabulary) * idf
    right_vector = _term_frequencies(right_tokens, vocabulary) * idf

    denominator = float(np.linalg.norm(left_vector) * np.linalg.norm(right_vector)) or 1.0
    similarity = float(np.dot(left_vector, right_vector)) / denominator
    return max(0.0, min(1.0, similarity))
