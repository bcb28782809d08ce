"""Prompt enrichment: rule-based classification of prompt text into a (category, source) pair.

Rules are evaluated in the order of RULES and the first match wins; there is no
scoring. Text that mentions both "code" and "math" is therefore Coding. Changing
the order of RULES changes results for such inputs.
"""

import re
from typing import NamedTuple, Protocol


class Classification(NamedTuple):
    """Derived labels for a prompt."""

    category: str
    source: str


class ClassificationRule(NamedTuple):
    """Keywords that map a prompt to a classification."""

    keywords: tuple[str, ...]
    result: Classification
    pattern: re.Pattern[str]


class Enrichable(Protocol):
    """Anything with prompt text and mutable category/source fields."""

    input_text: str | None
    category: str | None
    source: str | None


DEFAULT_CLASSIFICATION = Classification("General", "User")


def _rule(keywords: tuple[str, ...], category: str, source: str) -> ClassificationRule:
    """Compile a whole-word alternation: a keyword must not touch a word character on either side."""
    alternation = "|".join(re.escape(k) for k in keywords)
    pattern = re.compile(rf"(?<!\w)(?:{alternation})(?!\w)")
    return ClassificationRule(keywords, Classification(category, source), pattern)


# Order is part of the contract: first match wins.
RULES: tuple[ClassificationRule, ...] = (
    _rule(
        (
            "code",
            "program",
            "bug",
            "algorithm",
            "api",
            "c#",
            "c++",
            "python",
            "java",
            "javascript",
            "typescript",
        ),
        "Coding",
        "User",
    ),
    _rule(("write", "essay", "story", "paragraph", "poem"), "Writing", "User"),
    _rule(("math", "equation", "calculate", "solve", "formula"), "Math", "User"),
    _rule(
        ("data", "analyze", "statistics", "ai", "ml", "training"),
        "AI/Analytics",
        "System",
    ),
)


def classify(text: str | None) -> Classification:
    """Return the classification of text. Blank or missing text gets the General/User default."""
    if not text or not text.strip():
        return DEFAULT_CLASSIFICATION
    lowered = text.lower()
    for rule in RULES:
        if rule.pattern.search(lowered):
            return rule.result
    return DEFAULT_CLASSIFICATION


def enrich(prompt: Enrichable) -> Enrichable:
    """
    Populate category and source on prompt in place and return it.

    category is always recomputed. source is only filled when the caller left it empty.
    """
    result = classify(prompt.input_text)
    prompt.category = result.category
    if not prompt.source or not prompt.source.strip():
        prompt.source = result.source
    return prompt
