import re
from typing import Any, Callable, Dict, List, NamedTuple


class Rule(NamedTuple):
    """One phrase pattern and the filter it produces"""
    pattern: "re.Pattern[str]"
    key: str
    effect: Callable[["re.Match[str]"], Any]
    # leave an existing value for ``key`` alone instead of overwriting it
    keep_existing: bool = False


# Evaluated top to bottom; a later rule overwrites an earlier one on the same key.
RULES: List[Rule] = [
    Rule(re.compile(r"single word"), "word_count", lambda m: 1),
    Rule(re.compile(r"(\d+)\s+words?"), "word_count", lambda m: int(m.group(1)), keep_existing=True),
    Rule(re.compile(r"palindrom"), "is_palindrome", lambda m: True),
    Rule(re.compile(r"longer than (\d+)"), "min_length", lambda m: int(m.group(1)) + 1),
    Rule(re.compile(r"shorter than (\d+)"), "max_length", lambda m: int(m.group(1)) - 1),
    Rule(re.compile(r"at least (\d+) characters?"), "min_length", lambda m: int(m.group(1))),
    Rule(re.compile(r"at most (\d+) characters?"), "max_length", lambda m: int(m.group(1))),
    Rule(re.compile(r"contain(?:ing|s)? (?:the )?letter ([a-z])"), "contains_character", lambda m: m.group(1)),
    # "first vowel" always means 'a'
    Rule(re.compile(r"first vowel"), "contains_character", lambda m: "a"),
]


def parse_natural_language_query(query: str) -> Dict[str, Any]:
    """
    Parse natural language query into filter parameters
    Examples:
    - "all single word palindromic strings" -> {word_count: 1, is_palindrome: true}
    - "strings longer than 10 characters" -> {min_length: 11}
    - "strings containing the letter z" -> {contains_character: "z"}

    Returns an empty dict when nothing in the query is recognized.
    """
    if not isinstance(query, str):
        raise TypeError("query must be a string")

    query = query.lower()
    filters: Dict[str, Any] = {}

    for rule in RULES:
        if rule.keep_existing and rule.key in filters:
            continue
        match = rule.pattern.search(query)
        if match:
            filters[rule.key] = rule.effect(match)

    return filters
