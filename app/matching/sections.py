from __future__ import annotations

import re
from dataclasses import dataclass

_BULLET_CHARS = "•◦▪▫●○■□◆◇▶►-–—*·+"
_BULLET_PATTERN = re.compile(rf"^\s*(?:[{re.escape(_BULLET_CHARS)}]|(?:\d+[\.\)]))\s+")

_REQUIRED_HEAD_RE = re.compile(
    r"(requirement|must[-\s]?have|qualifications|you\s+will\s+need|what\s+you\s+need)",
    re.IGNORECASE,
)
_PREFERRED_HEAD_RE = re.compile(
    r"\b(preferred|nice\s*to\s*have|good\s*to\s*have|bonus|plus)\b",
    re.IGNORECASE,
)

_SKILLS_HEAD_RE = re.compile(r"^(skills|technical skills|tech skills|core skills)\b", re.IGNORECASE)
_SECTION_RE = re.compile(
    r"^(?:(?:professional|work|technical|relevant|career|employment|volunteer|research|additional)\s+)?"
    r"(summary|objective|profile|experience|history|background|education|projects|certifications|"
    r"awards|honors|publications|languages|interests|references|activities|achievements)\s*:?$",
    re.IGNORECASE,
)
_BOLD_HEADING_RE = re.compile(r"^\*\*.*\*\*$")
_MARKDOWN_HEADING_RE = re.compile(r"^#{1,6}\s")

OTHER = "other"
REQUIRED = "required"
PREFERRED = "preferred"


@dataclass(frozen=True, slots=True)
class JDBuckets:
    required: str = ""
    preferred: str = ""
    other: str = ""


def normalize_line(line: str) -> str:
    return re.sub(r"\s+", " ", line).strip()


def strip_bullet_prefix(line: str) -> str:
    return _BULLET_PATTERN.sub("", line).strip()


def _heading_text(line: str) -> str:
    return line.strip("#* ").rstrip(":").strip()


def _inline_content(line: str) -> str:
    if ":" not in line:
        return ""
    return line.split(":", 1)[1].strip()


def classify_header(line: str) -> str | None:
    """Return the bucket a header line switches to, or None for content lines.

    Required cues are checked first, so "Requirements: Go (Kubernetes a plus)"
    stays a required header.
    """
    if _REQUIRED_HEAD_RE.search(line):
        return REQUIRED
    if _PREFERRED_HEAD_RE.search(line):
        return PREFERRED
    return None


def bucketize_jd(jd_text: str) -> JDBuckets:
    """Split a job description into required / preferred / other text by heading cues.

    Header lines are consumed; any text after a header's first colon
    ("Requirements: Python, SQL") is kept in the bucket the header opens.
    """
    mode = OTHER
    lines: dict[str, list[str]] = {OTHER: [], REQUIRED: [], PREFERRED: []}
    for raw in (jd_text or "").splitlines():
        line = raw.strip()
        if not line:
            continue
        header = classify_header(line)
        if header is not None:
            mode = header
            inline = _inline_content(line)
            if inline:
                lines[mode].append(inline)
            continue
        lines[mode].append(line)

    return JDBuckets(
        required="\n".join(lines[REQUIRED]),
        preferred="\n".join(lines[PREFERRED]),
        other="\n".join(lines[OTHER]),
    )


def _ends_skills_block(line: str) -> bool:
    if _BOLD_HEADING_RE.match(line) or _MARKDOWN_HEADING_RE.match(line):
        return True
    return bool(_SECTION_RE.match(_heading_text(line)))


def extract_skills_block(resume_text: str) -> str:
    """Collect the content under a resume "Skills" heading, up to the next section heading."""
    capturing = False
    picked: list[str] = []
    for raw in (resume_text or "").splitlines():
        line = normalize_line(raw)
        if not line:
            continue
        if _SKILLS_HEAD_RE.match(_heading_text(line)):
            capturing = True
            inline = _inline_content(line)
            if inline:
                picked.append(inline)
            continue
        if not capturing:
            continue
        if _ends_skills_block(line):
            break
        picked.append(strip_bullet_prefix(line))
    return " ".join(item for item in picked if item)
