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
    current_user_id,
    register_crud_routes,
    request_body,
)
from finance_control.controllers.dependencies import get_finance_dependencies
from finance_control.services import reconcile_transaction
from finance_control.utils.response_builder import json_response, success_payload

DOCS_TAG = "Transactions"

transaction_bp = Blueprint("transactions", __name__, url_prefix="/transactions")

transaction_controller = CrudController(
    resource_key="transactions",
    entity_name="Transaction",
    collection_label="Transactions",
    docs_tag=DOCS_TAG,
    service_factory=lambda: get_finance_dependencies().transaction_service_factory(),
)


class TransactionReconcileResource(MethodResource):
    @doc(
        description="Mark one of the caller's transactions as reconciled or not.",
        tags=[DOCS_TAG],
        security=BEARER_SECURITY,
        params={"entity_id": {"in": "path", "type": "integer", "required": True}},
        responses={
            200: {"description": "Transaction reconciled"},
            400: {"description": "Invalid reconciliation data"},
            404: {"description": "Transaction not found"},
        },
    )
    @jwt_required()
    def put(self, entity_id: int) -> Any:
        transaction = reconcile_transaction(
            transaction_controller.service_factory(),
            entity_id,
            request_body(),
            current_user_id(),
        )
        return json_response(
            success_payload(transaction, "Transaction reconciled successfully"), 200
        )


DOCUMENTED_RESOURCES: list[DocumentedResource] = []
_ROUTES_REGISTERED = False


def register_transaction_routes() -> None:
    global _ROUTES_REGISTERED
    if _ROUTES_REGISTERED:
        return

    DOCUMENTED_RESOURCES.extend(
        register_crud_routes(transaction_bp, transaction_controller)
    )
    transaction_bp.add_url_rule(
        "/<int:entity_id>/reconcile",
        view_func=TransactionReconcileResource.as_view("transactions_reconcile"),
        methods=["PUT"],
    )
    DOCUMENTED_RESOURCES.append(
        DocumentedResource(
            TransactionReconcileResource,
            transaction_bp.name,
            "transactions_reconcile",
        )
    )

    _ROUTES_REGISTERED = True


register_transaction_routes()
