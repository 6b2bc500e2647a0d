# This file is part of WORKLOG.
# Licensed under the Business Source License 1.1 (BSL 1.1).
# See top-level LICENSE file for details.
# Change Date: 2030-01-01 (Transitions to Apache 2.0)

"""Text matching: regex, exact substring and edit-distance fuzzy."""

import logging
import re

from worklog.search.models import NO_MATCH, MatchType, SearchOptions, TextMatch

logger = logging.getLogger("worklog.search.text")

FUZZY_THRESHOLD = 0.6
REGEX_SCORE = 0.9
FUZZY_DISCOUNT = 0.8


def levenshtein_distance(a: str, b: str) -> int:
    """Single-character insert/delete/substitute edit distance."""
    matrix = [[0] * (len(a) + 1) for _ in range(len(b) + 1)]

    for i in range(len(b) + 1):
        matrix[i][0] = i
    for j in range(len(a) + 1):
        matrix[0][j] = j

    for i in range(1, len(b) + 1):
        for j in range(1, len(a) + 1):
            if b[i - 1] == a[j - 1]:
                matrix[i][j] = matrix[i - 1][j - 1]
            else:
                matrix[i][j] = min(
                    matrix[i - 1][j - 1] + 1,
                    matrix[i][j - 1] + 1,
                    matrix[i - 1][j] + 1,
                )

    return matrix[len(b)][len(a)]


def fuzzy_match(text: str, query: str, threshold: float = FUZZY_THRESHOLD) -> tuple[bool, float]:
    """Best word-level similarity between query and text.

    Returns:
        (matched, similarity) where similarity is in [0, 1] and a
        substring hit counts as 1.
    """
    normalized_text = text.lower()
    normalized_query = query.lower()

    if normalized_query in normalized_text:
        return True, 1.0

    best = 0.0
    for word in normalized_text.split():
        max_len = max(len(word), len(normalized_query))
        similarity = 1 - levenshtein_distance(word, normalized_query) / max_len
        if similarity > best:
            best = similarity

    return best >= threshold, best


def _regex_matches(text: str, query: str) -> bool:
    try:
        pattern = re.compile(query, re.IGNORECASE)
    except re.error as e:
        logger.debug("Invalid regex %r, falling back to text match: %s", query, e)
        return False
    return pattern.search(text) is not None


def match_text(text: str, query: str, options: SearchOptions) -> TextMatch:
    """Match one field. The first strategy that succeeds wins.

    Order: regex (if enabled), exact substring, fuzzy (if enabled).
    """
    normalized_text = text.lower()
    normalized_query = query.lower()

    if options.regex and _regex_matches(text, query):
        return TextMatch(matched=True, score=REGEX_SCORE, kind=MatchType.REGEX)

    if normalized_query in normalized_text:
        # Empty text can only contain an empty query
        ratio = len(normalized_query) / len(normalized_text) if normalized_text else 1.0
        return TextMatch(matched=True, score=0.5 + ratio * 0.5, kind=MatchType.EXACT)

    if options.fuzzy:
        matched, similarity = fuzzy_match(text, query)
        if matched:
            return TextMatch(matched=True, score=similarity * FUZZY_DISCOUNT, kind=MatchType.FUZZY)

    return NO_MATCH
