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

DOCS_TAG = "Transaction categories"

transaction_category_bp = Blueprint(
    "transaction_categories", __name__, url_prefix="/transaction-categories"
)

transaction_category_controller = CrudController(
    resource_key="transaction_categories",
    entity_name="Transaction category",
    collection_label="Transaction categories",
    docs_tag=DOCS_TAG,
    service_factory=lambda: (
        get_finance_dependencies().transaction_category_service_factory()
    ),
)


class TransactionCategoryAllResource(MethodResource):
    @doc(
        description="Every transaction category ordered by name, unpaged.",
        tags=[DOCS_TAG],
        security=BEARER_SECURITY,
        responses={200: {"description": "Categories ordered by name"}},
    )
    @jwt_required()
    def get(self) -> Any:
        service = transaction_category_controller.service_factory()
        return json_response(
            success_payload(
                service.find_all_ordered_by_name(),
                "Transaction categories retrieved successfully",
            ),
            200,
        )


DOCUMENTED_RESOURCES: list[DocumentedResource] = []
_ROUTES_REGISTERED = False


def register_transaction_category_routes() -> None:
    global _ROUTES_REGISTERED
    if _ROUTES_REGISTERED:
        return

    transaction_category_bp.add_url_rule(
        "/all",
        view_func=TransactionCategoryAllResource.as_view("transaction_categories_all"),
        methods=["GET"],
    )
    DOCUMENTED_RESOURCES.append(
        DocumentedResource(
            TransactionCategoryAllResource,
            transaction_category_bp.name,
            "transaction_categories_all",
        )
    )
    DOCUMENTED_RESOURCES.extend(
        register_crud_routes(transaction_category_bp, transaction_category_controller)
    )

    _ROUTES_REGISTERED = True


register_transaction_category_routes()
