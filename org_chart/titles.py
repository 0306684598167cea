"""
Seniority ranking for job titles.

Both lookups are ordered first-match lists of (pattern, outcome) pairs,
matched case-insensitively as substrings. The two lists are ordered
independently: "Senior Director" ranks as a senior director (1) while its level
is decided by "director" before "senior" is ever looked at.
"""

RANK_PATTERNS = [
    ("senior director", 1),
    ("director", 2),
    ("senior manager", 3),
    ("manager", 4),
    ("senior principal", 5),
    ("principal", 6),
    ("senior", 7),
    ("lead", 8),
    ("collaborative partner", 9),
    ("intern", 10),
]
DEFAULT_RANK = 8  # same as "lead"

LEVEL_PATTERNS = [
    ("director", "Director Level"),
    ("manager", "Manager Level"),
    ("principal", "Principal Level"),
    ("senior", "Senior Level"),
    ("intern", "Intern Level"),
    ("collaborative partner", "Partner Level"),
]
DEFAULT_LEVEL = "Individual Contributor"


def _first_match(title, patterns, default):
    t = (title or "").lower()
    for pattern, outcome in patterns:
        if pattern in t:
            return outcome
    return default


def rank(job_title) -> int:
    """Lower is more senior."""
    return _first_match(job_title, RANK_PATTERNS, DEFAULT_RANK)


def level(job_title) -> str:
    return _first_match(job_title, LEVEL_PATTERNS, DEFAULT_LEVEL)
