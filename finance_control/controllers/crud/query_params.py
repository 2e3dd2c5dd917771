from __future__ import annotations

import logging
from typing import Callable, Mapping

from werkzeug.datastructures import MultiDict

from finance_control.schemas import RESERVED_QUERY_PARAMS

logger = logging.getLogger(__name__)


def extract_filters(
    args: MultiDict[str, str] | Mapping[str, str],
    resolve_field: Callable[[str], str | None],
) -> dict[str, str]:
    """Turn non-reserved query parameters into attribute-keyed filters.

    Values stay raw strings; the repository converts them with the
    column type. Parameters that do not name a known field are dropped.
    """

    filters: dict[str, str] = {}
    for key in args.keys():
        if key in RESERVED_QUERY_PARAMS:
            continue
        attribute = resolve_field(key)
        if attribute is None:
            logger.debug("query_filter_ignored param=%s", key)
            continue
        raw = args.get(key)
        if raw is None or not str(raw).strip():
            continue
        filters[attribute] = str(raw).strip()
    return filters
