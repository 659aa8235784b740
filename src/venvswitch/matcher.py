"""
fuzzy matching of environment names.

declared environment names and discovered directory names rarely agree byte
for byte (`My-Project` vs `my_project`), so names are compared in a
normalised form: case-folded, with separators removed.

a candidate is eligible when its normalised name contains the query, or when
it is contained in the query and shares a prefix or suffix with it.
eligible candidates are ranked by the tuple

    (case-insensitive exact, normalised exact, longest common prefix/suffix)

and ties go to the earlier candidate, so results only depend on the inputs.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from typing import Final

from .models import Environment

logger = logging.getLogger(__name__)

_SEPARATORS: Final[re.Pattern[str]] = re.compile(r"[-_.\s]+")

Score = tuple[bool, bool, int]


def normalise_name(name: str) -> str:
    """case-fold a name and strip `-`, `_`, `.` and whitespace."""
    return _SEPARATORS.sub("", name.casefold())


def _common_prefix_length(a: str, b: str) -> int:
    length = 0
    for x, y in zip(a, b):
        if x != y:
            break
        length += 1
    return length


def _common_suffix_length(a: str, b: str) -> int:
    return _common_prefix_length(a[::-1], b[::-1])


def score_match(query: str, name: str) -> Score | None:
    """
    score a candidate name against a query.

    arguments:
        `query: str`
            requested name
        `name: str`
            candidate name

    returns: `Score | None`
        the ranking tuple, or none if the candidate is not eligible
    """
    norm_query = normalise_name(query)
    norm_name = normalise_name(name)

    if not norm_query or not norm_name:
        return None

    affix = max(
        _common_prefix_length(norm_query, norm_name),
        _common_suffix_length(norm_query, norm_name),
    )

    if norm_query not in norm_name:
        # a short name buried inside a long query is not a match
        if norm_name not in norm_query or affix == 0:
            return None

    return (
        query.casefold() == name.casefold(),
        norm_query == norm_name,
        affix,
    )


def best_match(venvs: Sequence[Environment], query: str) -> Environment | None:
    """
    pick the environment whose name best matches a query.

    arguments:
        `venvs: Sequence[Environment]`
            candidates, in listing order
        `query: str`
            requested name

    returns: `Environment | None`
        the best candidate, or none if nothing is eligible
    """
    best: Environment | None = None
    best_score: Score | None = None

    for venv in venvs:
        score = score_match(query, venv.name)
        if score is None:
            continue
        if best_score is None or score > best_score:
            best, best_score = venv, score

    if best is None:
        logger.debug("no candidate matched %r", query)
    else:
        logger.debug("matched %r to %s (score %s)", query, best, best_score)
    return best
