from __future__ import annotations

"""Sublime-style fuzzy matching score."""

from ..errors import require_not_none


def fuzzy_score(term: str, query: str) -> int:
    """Score how well *query* matches *term* as an ordered subsequence.

    Each character of the query found in the term scores one point, and
    matches directly following the previous match score two bonus points.
    Comparison is case-insensitive.
    """

    require_not_none(term=term, query=query)
    term_folded = term.casefold()
    query_folded = query.casefold()

    score = 0
    term_index = 0
    previous_match = None
    for query_char in query_folded:
        while term_index < len(term_folded):
            term_char = term_folded[term_index]
            term_index += 1
            if term_char != query_char:
                continue
            score += 1
            if previous_match is not None and previous_match + 1 == term_index - 1:
                score += 2
            previous_match = term_index - 1
            break
    return score
