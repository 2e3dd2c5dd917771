from __future__ import annotations

from dataclasses import dataclass

from flask import Blueprint
from flask_apispec.views import MethodResource
from flask_jwt_extended import verify_jwt_in_request

from .controller import CrudController
from .resources import build_crud_resources


@dataclass(frozen=True)
class DocumentedResource:
    resource: type[MethodResource]
    blueprint: str
    endpoint: str


def _verify_token() -> None:
    verify_jwt_in_request()


def require_jwt(blueprint: Blueprint) -> None:
    """Reject unauthenticated requests before any argument parsing runs."""

    blueprint.before_request(_verify_token)


def register_crud_routes(
    blueprint: Blueprint, controller: CrudController
) -> list[DocumentedResource]:
    """Bind the five CRUD routes of ``controller`` onto ``blueprint``."""

    require_jwt(blueprint)
    collection_resource, item_resource = build_crud_resources(controller)
    collection_endpoint = f"{controller.resource_key}_collection"
    item_endpoint = f"{controller.resource_key}_item"

    blueprint.add_url_rule(
        "",
        view_func=collection_resource.as_view(collection_endpoint),
        methods=["GET", "POST"],
    )
    blueprint.add_url_rule(
        "/<int:entity_id>",
        view_func=item_resource.as_view(item_endpoint),
        methods=["GET", "PUT", "DELETE"],
    )
    return [
        DocumentedResource(collection_resource, blueprint.name, collection_endpoint),
        DocumentedResource(item_resource, blueprint.name, item_endpoint),
    ]
