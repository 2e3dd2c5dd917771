# mypy: disable-error-code=misc

from __future__ import annotations

from typing import Any

from flask_apispec import doc, marshal_with, use_kwargs
from flask_apispec.views import MethodResource
from flask_jwt_extended import jwt_required

from finance_control.schemas import ApiResponseSchema, ErrorResponseSchema
from finance_control.schemas.query_schema import PageQuerySchema

from .controller import CrudController

BEARER_SECURITY = [{"BearerAuth": []}]


def build_crud_resources(
    controller: CrudController,
) -> tuple[type[MethodResource], type[MethodResource]]:
    """Build the collection and item ``MethodResource`` classes of a resource."""

    tag = controller.docs_tag
    entity = controller.entity_name.lower()

    class CollectionResource(MethodResource):
        @doc(
            description=(
                f"Paged list of {controller.collection_label.lower()}. Any query "
                "parameter other than page, size, search, sortBy and "
                "sortDirection is applied as an equality filter."
            ),
            tags=[tag],
            security=BEARER_SECURITY,
        )
        @use_kwargs(PageQuerySchema, location="query")
        @marshal_with(ApiResponseSchema, code=200, apply=False)
        @marshal_with(ErrorResponseSchema, code=400, apply=False)
        @marshal_with(ErrorResponseSchema, code=401, apply=False)
        @jwt_required()
        def get(self, **query: Any) -> Any:
            return controller.list(
                page=query["page"],
                size=query.get("size"),
                search=query.get("search"),
                sort_by=query.get("sort_by"),
                sort_direction=query.get("sort_direction"),
            )

        @doc(description=f"Create a {entity}.", tags=[tag], security=BEARER_SECURITY)
        @marshal_with(ApiResponseSchema, code=201, apply=False)
        @marshal_with(ErrorResponseSchema, code=400, apply=False)
        @marshal_with(ErrorResponseSchema, code=409, apply=False)
        @jwt_required()
        def post(self) -> Any:
            return controller.create()

    class ItemResource(MethodResource):
        @doc(
            description=f"Return a {entity} by id.",
            tags=[tag],
            security=BEARER_SECURITY,
            params={"entity_id": {"in": "path", "type": "integer", "required": True}},
        )
        @marshal_with(ApiResponseSchema, code=200, apply=False)
        @marshal_with(ErrorResponseSchema, code=404, apply=False)
        @jwt_required()
        def get(self, entity_id: int) -> Any:
            return controller.retrieve(entity_id)

        @doc(
            description=f"Update a {entity}.",
            tags=[tag],
            security=BEARER_SECURITY,
            params={"entity_id": {"in": "path", "type": "integer", "required": True}},
        )
        @marshal_with(ApiResponseSchema, code=200, apply=False)
        @marshal_with(ErrorResponseSchema, code=400, apply=False)
        @marshal_with(ErrorResponseSchema, code=404, apply=False)
        @marshal_with(ErrorResponseSchema, code=409, apply=False)
        @jwt_required()
        def put(self, entity_id: int) -> Any:
            return controller.update(entity_id)

        @doc(
            description=f"Delete a {entity}.",
            tags=[tag],
            security=BEARER_SECURITY,
            params={"entity_id": {"in": "path", "type": "integer", "required": True}},
        )
        @marshal_with(ApiResponseSchema, code=200, apply=False)
        @marshal_with(ErrorResponseSchema, code=404, apply=False)
        @jwt_required()
        def delete(self, entity_id: int) -> Any:
            return controller.delete(entity_id)

    prefix = "".join(part.title() for part in controller.resource_key.split("_"))
    CollectionResource.__name__ = f"{prefix}CollectionResource"
    CollectionResource.__qualname__ = CollectionResource.__name__
    ItemResource.__name__ = f"{prefix}ItemResource"
    ItemResource.__qualname__ = ItemResource.__name__
    return CollectionResource, ItemResource
