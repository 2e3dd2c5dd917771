from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from flask import Flask, current_app

from finance_control.services import (
    CrudService,
    FinancialGoalService,
    TransactionSubcategoryService,
    build_transaction_category_service,
    build_transaction_responsible_service,
    build_transaction_service,
)

FINANCE_DEPENDENCIES_EXTENSION_KEY = "finance_dependencies"


@dataclass(frozen=True)
class FinanceDependencies:
    transaction_category_service_factory: Callable[[], CrudService[Any]]
    transaction_subcategory_service_factory: Callable[
        [], TransactionSubcategoryService
    ]
    transaction_responsible_service_factory: Callable[[], CrudService[Any]]
    transaction_service_factory: Callable[[], CrudService[Any]]
    financial_goal_service_factory: Callable[[], FinancialGoalService]


def _default_dependencies() -> FinanceDependencies:
    return FinanceDependencies(
        transaction_category_service_factory=build_transaction_category_service,
        transaction_subcategory_service_factory=(
            TransactionSubcategoryService.with_defaults
        ),
        transaction_responsible_service_factory=build_transaction_responsible_service,
        transaction_service_factory=build_transaction_service,
        financial_goal_service_factory=FinancialGoalService.with_defaults,
    )


def register_finance_dependencies(
    app: Flask,
    dependencies: FinanceDependencies | None = None,
) -> None:
    if dependencies is None:
        dependencies = _default_dependencies()
    app.extensions.setdefault(FINANCE_DEPENDENCIES_EXTENSION_KEY, dependencies)


def get_finance_dependencies() -> FinanceDependencies:
    configured = current_app.extensions.get(FINANCE_DEPENDENCIES_EXTENSION_KEY)
    if isinstance(configured, FinanceDependencies):
        return configured
    fallback = _default_dependencies()
    current_app.extensions[FINANCE_DEPENDENCIES_EXTENSION_KEY] = fallback
    return fallback
