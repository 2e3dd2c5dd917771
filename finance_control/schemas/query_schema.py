from __future__ import annotations

from marshmallow import EXCLUDE, Schema, fields, pre_load, validate

# Query parameters consumed by the list endpoint itself; every other
# parameter is treated as an equality filter.
RESERVED_QUERY_PARAMS = frozenset(
    {"search", "sortBy", "sortDirection", "page", "size", "sort"}
)


class PageQuerySchema(Schema):
    class Meta:
        name = "PageQuery"
        unknown = EXCLUDE

    page = fields.Int(load_default=0, validate=validate.Range(min=0))
    size = fields.Int(load_default=None, validate=validate.Range(min=1))
    search = fields.Str(load_default=None)
    sort_by = fields.Str(
        load_default=None,
        data_key="sortBy",
        validate=validate.Length(min=1, max=64),
    )
    sort_direction = fields.Str(
        load_default="asc",
        data_key="sortDirection",
        validate=validate.OneOf(("asc", "desc")),
    )

    @pre_load
    def normalize(self, data: object, **kwargs: object) -> object:
        if not hasattr(data, "items"):
            return data
        normalized = {key: value for key, value in data.items()}
        direction = normalized.get("sortDirection")
        if isinstance(direction, str):
            normalized["sortDirection"] = direction.strip().lower()
        search = normalized.get("search")
        if isinstance(search, str) and not search.strip():
            normalized.pop("search")
        return normalized
