from __future__ import annotations

from werkzeug.datastructures import MultiDict

from finance_control.controllers.crud.query_params import extract_filters


def test_extract_filters_skips_reserved_and_unknown_parameters() -> None:
    known = {"categoryId": "category_id", "isActive": "is_active", "type": "type"}
    args = MultiDict(
        [
            ("page", "1"),
            ("size", "5"),
            ("search", "rent"),
            ("sortBy", "name"),
            ("sortDirection", "desc"),
            ("categoryId", "7"),
            ("isActive", "true"),
            ("type", ""),
            ("unknownField", "x"),
        ]
    )

    filters = extract_filters(args, known.get)

    assert filters == {"category_id": "7", "is_active": "true"}


def test_extract_filters_keeps_values_untyped() -> None:
    filters = extract_filters(MultiDict([("name", " 007 ")]), {"name": "name"}.get)

    assert filters == {"name": "007"}
