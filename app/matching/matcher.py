from __future__ import annotations

from dataclasses import dataclass, field

from .normalize import normalize
from .resolver import SynonymResolver, get_default_resolver


@dataclass(frozen=True, slots=True)
class MatchResult:
    keyword: str
    present: bool
    method: str


@dataclass(slots=True)
class Partition:
    present: list[str] = field(default_factory=list)
    missing: list[str] = field(default_factory=list)
    results: list[MatchResult] = field(default_factory=list)


def partition_keywords(
    keywords: list[str],
    text: str,
    resolver: SynonymResolver | None = None,
) -> Partition:
    """Split ``keywords`` into present / missing against ``text``, keeping input order."""
    checker = resolver or get_default_resolver()
    target = normalize(text)
    output = Partition()
    for keyword in keywords:
        method = checker.match_method(target, keyword)
        present = method != "none"
        output.results.append(MatchResult(keyword=keyword, present=present, method=method))
        (output.present if present else output.missing).append(keyword)
    return output
