from __future__ import annotations

from flask import Blueprint

from finance_control.controllers.crud import (
    CrudController,
    DocumentedResource,
    register_crud_routes,
)
from finance_control.controllers.dependencies import get_finance_dependencies

transaction_responsible_bp = Blueprint(
    "transaction_responsibles", __name__, url_prefix="/transaction-responsibles"
)

transaction_responsible_controller = CrudController(
    resource_key="transaction_responsibles",
    entity_name="Transaction responsible",
    collection_label="Transaction responsibles",
    docs_tag="Transaction responsibles",
    service_factory=lambda: (
        get_finance_dependencies().transaction_responsible_service_factory()
    ),
)

DOCUMENTED_RESOURCES: list[DocumentedResource] = register_crud_routes(
    transaction_responsible_bp, transaction_responsible_controller
)
