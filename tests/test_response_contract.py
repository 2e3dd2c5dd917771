from flask import Flask
from marshmallow import ValidationError
from sqlalchemy.exc import DataError
from webargs.flaskparser import use_args
from werkzeug.exceptions import NotFound, ServiceUnavailable

from finance_control.exceptions import (
    ConflictAPIError,
    ErrorKind,
    FieldError,
    InternalAPIError,
    NotFoundAPIError,
    ValidationAPIError,
)
from finance_control.extensions.error_handlers import (
    INTERNAL_ERROR_MESSAGE,
    register_error_handlers,
)
from finance_control.schemas.query_schema import PageQuerySchema
from finance_control.utils.pagination import Page, PageRequest, Sort, SortDirection
from finance_control.utils.response_builder import (
    error_payload,
    page_payload,
    success_payload,
)


def _app() -> Flask:
    app = Flask(__name__)
    register_error_handlers(app)
    return app


def test_success_payload_contract() -> None:
    payload = success_payload({"id": 1}, "Category created", path="/categories")

    assert payload["success"] is True
    assert payload["message"] == "Category created"
    assert payload["data"] == {"id": 1}
    assert payload["path"] == "/categories"
    assert payload["timestamp"].endswith("Z")


def test_success_payload_defaults() -> None:
    payload = success_payload()

    assert payload["data"] is None
    assert payload["message"] == "Operation completed successfully"
    assert payload["path"] is None


def test_success_payload_drops_sensitive_fields() -> None:
    payload = success_payload({"name": "Ana", "password": "x", "nested": [{"secret": 1}]})

    assert payload["data"] == {"name": "Ana", "nested": [{}]}


def test_error_payload_lists_validation_errors_only_for_validation_kind() -> None:
    errors = [FieldError("name", "Name is required", None)]

    validation = error_payload(ErrorKind.VALIDATION, "Invalid", "/x", errors)
    not_found = error_payload(ErrorKind.NOT_FOUND, "Missing", "/x", errors)

    assert validation["error"] == "VALIDATION"
    assert validation["validationErrors"] == [
        {"field": "name", "message": "Name is required", "rejectedValue": None}
    ]
    assert not_found["error"] == "NOT_FOUND"
    assert not_found["validationErrors"] is None


def test_page_payload_contract() -> None:
    page = Page(
        content=[{"id": 3}],
        total_elements=3,
        page_request=PageRequest(1, 2, (Sort("name", SortDirection.DESC),)),
    )

    payload = success_payload(page)["data"]

    assert payload == page_payload(page)
    assert payload["content"] == [{"id": 3}]
    assert payload["totalElements"] == 3
    assert payload["totalPages"] == 2
    assert payload["first"] is False
    assert payload["last"] is True
    assert payload["numberOfElements"] == 1
    assert payload["pageable"] == {
        "pageNumber": 1,
        "pageSize": 2,
        "sort": [{"property": "name", "direction": "desc"}],
    }


def test_validation_api_error_uses_standard_contract() -> None:
    app = _app()

    @app.route("/validation-error")
    def validation_error() -> None:
        raise ValidationAPIError.for_field("amount", "Amount must be positive", -1)

    response = app.test_client().get("/validation-error")
    data = response.get_json()

    assert response.status_code == 400
    assert data["error"] == "VALIDATION"
    assert data["path"] == "/validation-error"
    assert data["validationErrors"] == [
        {"field": "amount", "message": "Amount must be positive", "rejectedValue": -1}
    ]


def test_not_found_and_conflict_errors_keep_their_message() -> None:
    app = _app()

    @app.route("/missing")
    def missing() -> None:
        raise NotFoundAPIError.for_entity("Financial goal", 999)

    @app.route("/conflict")
    def conflict() -> None:
        raise ConflictAPIError("Transaction category with name 'Food' already exists")

    client = app.test_client()
    missing_response = client.get("/missing")
    conflict_response = client.get("/conflict")

    assert missing_response.status_code == 404
    assert missing_response.get_json()["message"] == (
        "Financial goal not found with id: 999"
    )
    assert missing_response.get_json()["validationErrors"] is None
    assert conflict_response.status_code == 409
    assert conflict_response.get_json()["error"] == "CONFLICT"


def test_internal_api_error_hides_message() -> None:
    app = _app()

    @app.route("/internal")
    def internal() -> None:
        raise InternalAPIError("database password leaked here")

    response = app.test_client().get("/internal")

    assert response.status_code == 500
    assert response.get_json()["message"] == INTERNAL_ERROR_MESSAGE


def test_marshmallow_validation_error_is_flattened() -> None:
    app = _app()

    @app.route("/schema")
    def schema_error() -> None:
        raise ValidationError(
            {"responsibilities": {0: {"percentage": ["Too large."]}}},
            data={"responsibilities": [{"percentage": "150"}]},
        )

    response = app.test_client().get("/schema")
    data = response.get_json()

    assert response.status_code == 400
    assert data["validationErrors"] == [
        {
            "field": "responsibilities.0.percentage",
            "message": "Too large.",
            "rejectedValue": "150",
        }
    ]


def test_webargs_query_errors_become_validation_errors() -> None:
    app = _app()

    @app.route("/items")
    @use_args(PageQuerySchema(), location="query")
    def items(args) -> dict:
        return {"page": args["page"]}

    client = app.test_client()
    ok = client.get("/items?page=2")
    bad = client.get("/items?page=-1&sortDirection=up")

    assert ok.status_code == 200
    assert ok.get_json() == {"page": 2}
    assert bad.status_code == 400
    fields = {error["field"] for error in bad.get_json()["validationErrors"]}
    assert fields == {"page", "sortDirection"}


def test_http_exception_handler_uses_standard_contract() -> None:
    app = _app()

    @app.route("/http-missing")
    def http_missing() -> None:
        raise NotFound("Nothing here")

    @app.route("/unavailable")
    def unavailable() -> None:
        raise ServiceUnavailable("maintenance details")

    client = app.test_client()
    missing = client.get("/http-missing")
    unavailable_response = client.get("/unavailable")

    assert missing.status_code == 404
    assert missing.get_json()["error"] == "NOT_FOUND"
    assert missing.get_json()["message"] == "Nothing here"
    assert unavailable_response.status_code == 503
    assert unavailable_response.get_json()["error"] == "INTERNAL"
    assert unavailable_response.get_json()["message"] == INTERNAL_ERROR_MESSAGE


def test_method_not_allowed_keeps_status_and_allow_header() -> None:
    app = _app()

    @app.route("/only-get", methods=["GET"])
    def only_get() -> dict:
        return {}

    response = app.test_client().post("/only-get")

    assert response.status_code == 405
    assert "GET" in response.headers["Allow"]


def test_generic_exception_handler_uses_standard_contract() -> None:
    app = _app()

    @app.route("/boom")
    def boom() -> None:
        raise RuntimeError("boom")

    response = app.test_client().get("/boom")
    data = response.get_json()

    assert response.status_code == 500
    assert data["error"] == "INTERNAL"
    assert data["message"] == INTERNAL_ERROR_MESSAGE


def test_database_data_error_is_a_validation_error(app) -> None:
    @app.route("/overflow")
    def overflow() -> None:
        raise DataError(
            "INSERT INTO transactions", {}, Exception("numeric field overflow")
        )

    response = app.test_client().get("/overflow")
    data = response.get_json()

    assert response.status_code == 400
    assert data["error"] == "VALIDATION"
    assert "numeric field overflow" not in data["message"]


def test_error_kind_from_status() -> None:
    assert ErrorKind.from_status(404) is ErrorKind.NOT_FOUND
    assert ErrorKind.from_status(502) is ErrorKind.INTERNAL
    assert ErrorKind.from_status(422) is ErrorKind.VALIDATION
    assert ErrorKind.CONFLICT.status_code == 409
