from __future__ import annotations

import re
from functools import lru_cache

from app.core.config.scoring import get_scoring_value
from app.taxonomy import TaxonomyProvider, get_default_taxonomy_provider

from .normalize import normalize

_DEFAULT_SUFFIXES = ("ing", "ed", "es", "s")
_DEFAULT_THRESHOLD = 0.6


@lru_cache(maxsize=4096)
def _whole_word(term: str) -> re.Pattern[str]:
    # alnum lookarounds instead of \b so c++, c#, .net anchor correctly
    return re.compile(rf"(?<![a-z0-9]){re.escape(term)}(?![a-z0-9])")


@lru_cache(maxsize=4096)
def _word_prefix(stem: str) -> re.Pattern[str]:
    return re.compile(rf"(?<![a-z0-9]){re.escape(stem)}[a-z0-9]*(?![a-z0-9])")


class SynonymResolver:
    """Presence tests for a keyword against normalized text.

    ``contains`` is exact variant matching OR fuzzy stem overlap; it is the only
    predicate the matcher uses.
    """

    def __init__(
        self,
        taxonomy: TaxonomyProvider | None = None,
        *,
        fuzzy_threshold: float | None = None,
        suffixes: tuple[str, ...] | None = None,
    ) -> None:
        self.taxonomy = taxonomy or get_default_taxonomy_provider()
        if fuzzy_threshold is None:
            fuzzy_threshold = float(get_scoring_value("matching.fuzzy.threshold", _DEFAULT_THRESHOLD))
        if suffixes is None:
            suffixes = tuple(get_scoring_value("matching.fuzzy.suffixes", _DEFAULT_SUFFIXES))
        self.fuzzy_threshold = fuzzy_threshold
        self._suffix_re = re.compile("(?:" + "|".join(re.escape(item) for item in suffixes) + ")$") if suffixes else None

    def variants(self, term: str) -> list[str]:
        canonical = normalize(term)
        output: list[str] = []
        for candidate in (canonical, *(normalize(alt) for alt in self.taxonomy.alternates(canonical))):
            if candidate and candidate not in output:
                output.append(candidate)
        return output

    def stem(self, token: str) -> str:
        if self._suffix_re is None:
            return token
        stripped = self._suffix_re.sub("", token, count=1)
        return stripped or token

    def exact_contains(self, text: str, term: str) -> bool:
        target = normalize(text)
        if not target:
            return False
        return any(_whole_word(variant).search(target) for variant in self.variants(term))

    def fuzzy_contains(self, text: str, term: str) -> bool:
        target = normalize(text)
        pieces = normalize(term).split()
        if not target or not pieces:
            return False
        hits = sum(1 for piece in pieces if _word_prefix(self.stem(piece)).search(target))
        return hits / len(pieces) >= self.fuzzy_threshold

    def match_method(self, text: str, term: str) -> str:
        """Return ``exact``, ``fuzzy`` or ``none`` for ``term`` against ``text``."""
        if self.exact_contains(text, term):
            return "exact"
        if self.fuzzy_contains(text, term):
            return "fuzzy"
        return "none"

    def contains(self, text: str, term: str) -> bool:
        return self.match_method(text, term) != "none"


@lru_cache(maxsize=1)
def get_default_resolver() -> SynonymResolver:
    return SynonymResolver()
