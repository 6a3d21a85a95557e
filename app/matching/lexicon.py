"""Static word lists shared by the tokenizer and ranker. Read-only after import."""

from __future__ import annotations

import re

STOPWORDS = frozenset(
    {
        "the", "a", "an", "and", "or", "for", "to", "of", "in", "on", "at", "with", "by", "from",
        "as", "is", "are", "was", "were", "be", "being", "been",
        "your", "you", "we", "our", "they", "them", "their", "this", "that", "these", "those",
        "will", "can", "must", "should", "could", "may", "would",
        "i", "me", "my", "mine", "us",
        "job", "role", "roles", "team", "teams", "company", "organization", "position",
        "summary", "description",
        "responsibilities", "responsibility", "requirements", "requirement",
        "qualifications", "qualification",
        "about", "years", "year", "plus", "include", "including", "across",
        "work", "working", "worked", "design", "designed", "develop", "developed",
        "maintain", "maintained", "support", "supported", "provide", "provided",
        "good", "great", "excellent", "strong", "communication", "experience", "experienced",
        "familiarity", "knowledge", "understanding",
        # section-header vocabulary
        "preferred", "nice", "bonus", "must-have", "need", "have",
    }
)

# never allowed as standalone keywords
EXCLUDE_TOKENS = frozenset(
    {
        ".", "-", "–", "—",
        "balance", "balances", "accurate", "accuracy", "account", "accounts",
        "corporate", "office", "corporate office",
        "key", "addition", "added", "used", "use", "using", "hands", "handson", "hands-on",
    }
)

GENERIC_SINGLE_WORDS = frozenset(
    {
        "customer", "clients", "stakeholders", "users", "business", "product", "services",
        "applications", "systems", "process", "processes", "tools", "solutions", "environment",
        "projects", "project", "platform", "platforms", "framework",
    }
)

NOISE_BIGRAMS = frozenset({"corporate office", "balances accurate", "worked addition"})

MAX_TOKEN_LENGTH = 24

TLD_RE = re.compile(r"\b[a-z0-9-]+\.(?:com|net|org|io|in|co|ai|dev|tech|gov|edu)\b")
NUMPLUS_RE = re.compile(r"^\d+\+$")
DIGITS_RE = re.compile(r"^\d+$")
TECH_CHAR_RE = re.compile(r"[+.#/0-9]")
