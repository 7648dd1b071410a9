"""
Company Names — Abbreviation-tolerant builder name matching

Calendar events and imported spreadsheets refer to builders by shortened
names ("MI Homes Const Corp" for "M/I Homes Construction Corp"). The matcher
is a heuristic:

1. Normalize both names: lowercase, trim, drop everything except ASCII word
   characters and whitespace
2. Identical after normalization -> match
3. Split on whitespace; a candidate with more words than the full name
   never matches
4. Greedy left-to-right scan, no backtracking: for each candidate word,
   walk forward through the unconsumed full-name words until one equals
   it, starts with it, or lists it in ABBREVIATIONS. Every full-name word
   visited is consumed, matched or not.
5. Any candidate word left unmatched -> no match
"""

import re
from collections.abc import Mapping
from types import MappingProxyType
from typing import Final

# Known abbreviations per full word (normalized form)
ABBREVIATIONS: Final[Mapping[str, frozenset[str]]] = MappingProxyType(
    {
        "construction": frozenset({"const", "constr", "constru"}),
        "corporation": frozenset({"corp"}),
        "company": frozenset({"co"}),
        "incorporated": frozenset({"inc"}),
        "limited": frozenset({"ltd"}),
        "building": frozenset({"bldg", "blding"}),
        "development": frozenset({"dev", "devel"}),
        "homes": frozenset({"home"}),
        "properties": frozenset({"prop", "props"}),
    }
)

_STRIP_PATTERN: Final[re.Pattern[str]] = re.compile(r"[^A-Za-z0-9_\s]")
_WORD_SPLIT_PATTERN: Final[re.Pattern[str]] = re.compile(r"\s+")


def normalize_company_name(name: str) -> str:
    """
    Examples:
        >>> normalize_company_name("  M/I Homes, Inc. ")
        'mi homes inc'
    """
    return _STRIP_PATTERN.sub("", name.lower().strip())


def _word_matches(full_word: str, candidate_word: str) -> bool:
    if full_word == candidate_word:
        return True
    if full_word.startswith(candidate_word):
        return True
    return candidate_word in ABBREVIATIONS.get(full_word, frozenset())


def match_company_abbreviation(full_name: str | None, candidate_name: str | None) -> bool:
    """
    Does `candidate_name` plausibly abbreviate `full_name`?

    Args:
        full_name: Canonical builder name
        candidate_name: Name as written in the external source

    Returns:
        True if every candidate word matches, in order

    Examples:
        >>> match_company_abbreviation("M/I Homes Construction Corp", "MI Homes Const Corp")
        True
        >>> match_company_abbreviation("Lennar Corp", "Lennar Corp Extra Words")
        False
    """
    if not full_name or not candidate_name:
        return False

    normalized_full = normalize_company_name(full_name)
    normalized_candidate = normalize_company_name(candidate_name)

    if normalized_full == normalized_candidate:
        return True

    full_words = _WORD_SPLIT_PATTERN.split(normalized_full)
    candidate_words = _WORD_SPLIT_PATTERN.split(normalized_candidate)

    if len(candidate_words) > len(full_words):
        return False

    full_index = 0
    for candidate_word in candidate_words:
        matched = False

        while full_index < len(full_words):
            full_word = full_words[full_index]
            full_index += 1
            if _word_matches(full_word, candidate_word):
                matched = True
                break

        if not matched:
            return False

    return True
