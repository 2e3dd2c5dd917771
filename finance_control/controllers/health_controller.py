"""
Public liveness endpoint.

`GET /healthz` answers 200 with `{"status": "ok"}` without authentication
and without touching the database.
"""

from __future__ import annotations

from flask import Blueprint, Response, jsonify
from flask_apispec import doc

health_bp = Blueprint("health", __name__)


@health_bp.get("/healthz")
@doc(
    description="Public liveness check for infrastructure monitoring.",
    tags=["Health"],
    responses={200: {"description": "Service is alive"}},
)
def healthz() -> tuple[Response, int]:
    return jsonify({"status": "ok"}), 200
