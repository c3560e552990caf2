"""
Sort token parsing for team listings.

A token is a field name, optionally prefixed with "-" for descending order:
["name", "-budget"] -> [name ASC, budget DESC]. Output order follows input
order, so earlier tokens take precedence.

Functional Core - pure parsing and validation.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from src.domain.entities import Team

from .models import InvalidSortFieldError, SortDirection, SortOrder

logger = logging.getLogger(__name__)

DESCENDING_PREFIX = "-"

SORTABLE_FIELDS: frozenset[str] = frozenset({"name", "acronym", "budget"})

# A sortable field that is no longer declared on Team must not validate.
VALID_SORT_FIELDS: frozenset[str] = SORTABLE_FIELDS & frozenset(Team.model_fields)


def parse_sort_token(token: str) -> SortOrder:
    """
    Parse one sort token.

    Raises:
        InvalidSortFieldError: if the field is not sortable. A lone "-"
            resolves to an empty field name and fails the same way.
    """
    descending = token.startswith(DESCENDING_PREFIX)
    field_name = token[len(DESCENDING_PREFIX):] if descending else token

    if field_name not in VALID_SORT_FIELDS:
        logger.error("Invalid sorting field: %s", field_name)
        raise InvalidSortFieldError(field_name)

    direction = SortDirection.DESC if descending else SortDirection.ASC
    logger.info("Sorting by field: %s, direction: %s", field_name, direction.value)
    return SortOrder(field=field_name, direction=direction)


def parse_sort_tokens(tokens: Sequence[str] | None) -> tuple[SortOrder, ...]:
    """
    Parse sort tokens in order.

    None or an empty sequence means no explicit ordering. Any invalid token
    rejects the whole sequence.
    """
    if not tokens:
        return ()
    return tuple(parse_sort_token(token) for token in tokens)
