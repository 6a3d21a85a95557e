from __future__ import annotations

from typing import Protocol


class TaxonomyProvider(Protocol):
    def alternates(self, term: str) -> tuple[str, ...]:
        """Return registered alternate spellings for a canonical term (empty if unregistered)."""

    def is_canonical(self, term: str) -> bool:
        """Return True when the term is a registered canonical key."""
