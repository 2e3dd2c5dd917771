# mypy: disable-error-code=misc

from __future__ import annotations

from typing import Any

from flask import Blueprint
from flask_apispec import doc
from flask_apispec.views import MethodResource
from flask_jwt_extended import jwt_required

from finance_control.controllers.crud import (
    BEARER_SECURITY,
    CrudController,
    DocumentedResource,
    register_crud_routes,
)
from finance_control.controllers.dependencies import get_finance_dependencies
from finance_control.utils.response_builder import json_response, success_payload

DOCS_TAG = "Transaction subcategories"

transaction_subcategory_bp = Blueprint(
    "transaction_subcategories", __name__, url_prefix="/transaction-subcategories"
)

transaction_subcategory_controller = CrudController(
    resource_key="transaction_subcategories",
    entity_name="Transaction subcategory",
    collection_label="Transaction subcategories",
    docs_tag=DOCS_TAG,
    service_factory=lambda: (
        get_finance_dependencies().transaction_subcategory_service_factory().crud
    ),
)


class SubcategoriesByCategoryResource(MethodResource):
    @doc(
        description="Active subcategories of a category ordered by name.",
        tags=[DOCS_TAG],
        security=BEARER_SECURITY,
        params={"category_id": {"in": "path", "type": "integer", "required": True}},
        responses={200: {"description": "Subcategories of the category"}},
    )
    @jwt_required()
    def get(self, category_id: int) -> Any:
        service = get_finance_dependencies().transaction_subcategory_service_factory()
        return json_response(
            success_payload(
                service.find_by_category(category_id),
                "Transaction subcategories retrieved successfully",
            ),
            200,
        )


DOCUMENTED_RESOURCES: list[DocumentedResource] = []
_ROUTES_REGISTERED = False


def register_transaction_subcategory_routes() -> None:
    global _ROUTES_REGISTERED
    if _ROUTES_REGISTERED:
        return

    transaction_subcategory_bp.add_url_rule(
        "/category/<int:category_id>",
        view_func=SubcategoriesByCategoryResource.as_view(
            "transaction_subcategories_by_category"
        ),
        methods=["GET"],
    )
    DOCUMENTED_RESOURCES.append(
        DocumentedResource(
            SubcategoriesByCategoryResource,
            transaction_subcategory_bp.name,
            "transaction_subcategories_by_category",
        )
    )
    DOCUMENTED_RESOURCES.extend(
        register_crud_routes(
            transaction_subcategory_bp, transaction_subcategory_controller
        )
    )

    _ROUTES_REGISTERED = True


register_transaction_subcategory_routes()
