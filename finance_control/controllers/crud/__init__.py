from .controller import CrudController, current_user_id, request_body
from .query_params import extract_filters
from .resources import BEARER_SECURITY, build_crud_resources
from .routes import DocumentedResource, register_crud_routes, require_jwt

__all__ = [
    "BEARER_SECURITY",
    "CrudController",
    "DocumentedResource",
    "build_crud_resources",
    "current_user_id",
    "extract_filters",
    "register_crud_routes",
    "request_body",
    "require_jwt",
]
