from typing import Any, Dict

from flask import Response, current_app
from flask_jwt_extended import JWTManager

from finance_control.exceptions import ErrorKind
from finance_control.utils.response_builder import error_payload, json_response


def _unauthorized(message: str, reason: str) -> Response:
    current_app.logger.warning("jwt_rejected reason=%s", reason)
    return json_response(
        error_payload(ErrorKind.UNAUTHORIZED, message),
        ErrorKind.UNAUTHORIZED.status_code,
    )


def register_jwt_callbacks(jwt: JWTManager) -> None:
    @jwt.invalid_token_loader  # type: ignore[misc]
    def invalid_token_callback(error: str) -> Any:
        return _unauthorized("Invalid token", error)

    @jwt.expired_token_loader  # type: ignore[misc]
    def expired_token_callback(
        jwt_header: Dict[str, Any], jwt_payload: Dict[str, Any]
    ) -> Any:
        return _unauthorized("Token has expired", "expired")

    @jwt.unauthorized_loader  # type: ignore[misc]
    def missing_token_callback(error: str) -> Any:
        return _unauthorized("Missing authorization token", error)

    @jwt.user_lookup_error_loader  # type: ignore[misc]
    def user_lookup_error_callback(
        jwt_header: Dict[str, Any], jwt_payload: Dict[str, Any]
    ) -> Any:
        return _unauthorized("Invalid token", "user_lookup")
