from __future__ import annotations

import logging
import re
from collections import Counter
from dataclasses import dataclass, field

from app.taxonomy import TaxonomyProvider, get_default_taxonomy_provider

from .config import EngineConfig, get_engine_config
from .lexicon import NOISE_BIGRAMS
from .sections import bucketize_jd
from .tokenize import bigrams, is_noisy_token, is_technical, tokenize

logger = logging.getLogger(__name__)

# list and sentence delimiters; bigrams never span them
_SEGMENT_RE = re.compile(r"[,;:()|•\n\r]+|\.(?=\s|$)")


@dataclass(slots=True)
class KeywordLists:
    required: list[str] = field(default_factory=list)
    preferred: list[str] = field(default_factory=list)
    used_fallback: bool = False


def rank_keywords(text: str, limit: int = 30, taxonomy: TaxonomyProvider | None = None) -> list[str]:
    """Frequency-ranked keyword candidates of ``text``, technical-looking terms first.

    Tokens and skill-ish bigrams (paired within one list item or sentence) are
    counted together, ordered by count then alphabetically, deduplicated
    case-insensitively and capped at ``limit``.
    """
    if limit <= 0:
        return []
    provider = taxonomy or get_default_taxonomy_provider()
    counts: Counter[str] = Counter()
    for segment in _SEGMENT_RE.split(text or ""):
        tokens = tokenize(segment)
        counts.update(tokens)
        counts.update(bigrams(tokens, provider))

    ordered = [term for term, _ in sorted(counts.items(), key=lambda item: (-item[1], item[0]))]
    technical = [term for term in ordered if " " in term or is_technical(term, provider)]

    ranked: list[str] = []
    seen: set[str] = set()
    for candidate in technical + ordered:
        cleaned = candidate.strip()
        key = cleaned.lower()
        if not cleaned or key in seen:
            continue
        if is_noisy_token(cleaned) or key in NOISE_BIGRAMS:
            continue
        seen.add(key)
        ranked.append(cleaned)
        if len(ranked) >= limit:
            break
    return ranked


def _unique(terms: list[str], exclude: set[str] | None = None) -> list[str]:
    blocked = set(exclude or ())
    output: list[str] = []
    for term in terms:
        key = term.lower()
        if key in blocked:
            continue
        blocked.add(key)
        output.append(term)
    return output


def select_keyword_lists(
    jd_text: str,
    config: EngineConfig | None = None,
    taxonomy: TaxonomyProvider | None = None,
) -> KeywordLists:
    """Build the capped required / preferred keyword lists for a job description.

    Headerless descriptions fall back to a split of the globally ranked list;
    a short required list is backfilled from unbucketed text.
    """
    cfg = config or get_engine_config()
    provider = taxonomy or get_default_taxonomy_provider()
    jd_text = jd_text or ""
    buckets = bucketize_jd(jd_text)

    required = rank_keywords(buckets.required, cfg.bucket_rank, provider)
    preferred = rank_keywords(buckets.preferred, cfg.bucket_rank, provider)
    used_fallback = False

    if not required and not preferred:
        used_fallback = True
        global_terms = rank_keywords(jd_text, cfg.global_rank, provider)
        mid = min(cfg.global_split, len(global_terms) // 2)
        required = global_terms[:mid]
        preferred = global_terms[mid : mid + cfg.preferred_cap]

    if len(required) < cfg.backfill_threshold:
        source = buckets.other or jd_text
        taken = {term.lower() for term in required} | {term.lower() for term in preferred}
        extra = _unique(rank_keywords(source, cfg.backfill_rank, provider), exclude=taken)
        required = required + extra

    required = _unique(required)[: cfg.required_cap]
    preferred = _unique(preferred, exclude={term.lower() for term in required})[: cfg.preferred_cap]

    logger.debug(
        "keyword_lists_selected required=%s preferred=%s fallback=%s",
        len(required),
        len(preferred),
        used_fallback,
    )
    return KeywordLists(required=required, preferred=preferred, used_fallback=used_fallback)
