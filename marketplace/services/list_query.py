"""
Listing query normalizer: raw query parameters -> validated AdListQuery.
Fails with ValidationError naming the first offending field; nothing partial is returned.
"""

import math
import re
from collections.abc import Mapping

from marketplace.config import get_settings
from marketplace.core.exceptions import ValidationError
from marketplace.schemas.ad import AdListQuery

settings = get_settings()

SORT_FIELDS = ("created_at", "price")
SORT_ORDERS = ("asc", "desc")

_INT_RE = re.compile(r"[+-]?[0-9]+")

# Largest row offset the store can take (signed 64-bit)
MAX_OFFSET = 2**63 - 1


def _positive_int(raw: str, field: str, upper: int | None = None) -> int:
    if not _INT_RE.fullmatch(raw):
        raise ValidationError(f"invalid {field} value")
    try:
        value = int(raw)
    except ValueError:
        # digit strings past the interpreter's conversion limit
        raise ValidationError(f"invalid {field} value") from None
    if value <= 0 or (upper is not None and value > upper):
        raise ValidationError(f"invalid {field} value")
    return value


def _non_negative_price(raw: str, field: str) -> float:
    try:
        value = float(raw)
    except ValueError:
        raise ValidationError(f"invalid {field} value") from None
    if not math.isfinite(value) or value < 0:
        raise ValidationError(f"invalid {field} value")
    return value


def parse_list_query(params: Mapping[str, str]) -> AdListQuery:
    """
    Build a listing query from untyped parameters.

    Defaults are page=1 and the configured page size. An empty value counts as absent.
    max_price=0 means "no ceiling", so min_price=500 alone is valid.
    """
    page = 1
    page_size = settings.default_page_size
    min_price = 0.0
    max_price = 0.0

    if raw := params.get("page"):
        page = _positive_int(raw, "page")
    if raw := params.get("page_size"):
        page_size = _positive_int(raw, "page_size", upper=settings.max_page_size)
    if (page - 1) * page_size > MAX_OFFSET:
        raise ValidationError("invalid page value")

    sort_by = params.get("sort_by") or ""
    if sort_by and sort_by not in SORT_FIELDS:
        raise ValidationError("invalid sort_by value")
    sort_order = params.get("sort_order") or ""
    if sort_order and sort_order not in SORT_ORDERS:
        raise ValidationError("invalid sort_order value")

    if raw := params.get("min_price"):
        min_price = _non_negative_price(raw, "min_price")
    if raw := params.get("max_price"):
        max_price = _non_negative_price(raw, "max_price")

    if min_price > max_price and max_price != 0:
        raise ValidationError("min_price cannot be greater than max_price")

    return AdListQuery(
        page=page,
        page_size=page_size,
        sort_by=sort_by,
        sort_order=sort_order,
        min_price=min_price,
        max_price=max_price,
    )
