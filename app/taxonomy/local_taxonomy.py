from __future__ import annotations

import json
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

from .provider import TaxonomyProvider


class LocalTaxonomy(TaxonomyProvider):
    """Canonical term -> alternate spellings, loaded once from a JSON file.

    Keys are stored lowercased and stripped; lookups expect terms in the same
    normalized form the tokenizer produces.
    """

    def __init__(self, synonyms_path: str | Path | None = None) -> None:
        path = Path(synonyms_path) if synonyms_path else Path(__file__).with_name("synonyms.json")
        self._synonyms = self._load_synonyms(path)

    @staticmethod
    def _load_synonyms(path: Path) -> Mapping[str, tuple[str, ...]]:
        try:
            with path.open("r", encoding="utf-8") as handle:
                raw = json.load(handle)
        except (OSError, json.JSONDecodeError) as exc:
            raise RuntimeError(f"Unable to load synonyms from '{path}': {exc}") from exc

        if not isinstance(raw, dict):
            raise RuntimeError(f"Invalid synonyms file '{path}': expected a JSON object.")

        synonyms: dict[str, tuple[str, ...]] = {}
        for key, values in raw.items():
            if not isinstance(values, list):
                raise RuntimeError(f"Invalid synonyms entry '{key}' in '{path}': expected a list.")
            canonical = str(key).strip().lower()
            if not canonical:
                continue
            synonyms[canonical] = tuple(str(value).strip().lower() for value in values if str(value).strip())
        return MappingProxyType(synonyms)

    @property
    def canonical_terms(self) -> frozenset[str]:
        return frozenset(self._synonyms)

    def alternates(self, term: str) -> tuple[str, ...]:
        return self._synonyms.get(term.strip().lower(), ())

    def is_canonical(self, term: str) -> bool:
        return term.strip().lower() in self._synonyms
