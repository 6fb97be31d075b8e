"""
Single entrypoint Lambda that routes HTTP API requests to thin handler modules.

Why one Lambda?
- Keeps the database engine and its pool warm across routes.
- Simpler to deploy while still keeping code organized by delegating to modules.
"""

import re
from typing import Callable, Dict, Optional, Pattern, Tuple

from pydantic import ValidationError as PydanticValidationError

from . import customer_routes, health_check, recurring_service_routes, service_routes
from utils.error_handling import AppError, InternalError, from_pydantic, to_response
from utils.http import json_response
from utils.logging_config import get_logger

logger = get_logger(__name__)

ID = r"(?P<id>[^/]+)"

# (method, path pattern, handler). Handlers take (event, registry).
ROUTES: Tuple[Tuple[str, str, Callable], ...] = (
    ("GET", r"/api/customers", customer_routes.list_customers),
    ("POST", r"/api/customers", customer_routes.create_customer),
    ("GET", rf"/api/customers/{ID}/history", customer_routes.customer_history),
    ("GET", rf"/api/customers/{ID}", customer_routes.get_customer),
    ("PUT", rf"/api/customers/{ID}", customer_routes.update_customer),
    ("DELETE", rf"/api/customers/{ID}", customer_routes.delete_customer),
    ("GET", r"/api/services", service_routes.list_services),
    ("POST", r"/api/services", service_routes.create_service),
    ("POST", rf"/api/services/{ID}/start", service_routes.start_service),
    ("POST", rf"/api/services/{ID}/complete", service_routes.complete_service),
    ("POST", rf"/api/services/{ID}/skip", service_routes.skip_service),
    ("GET", rf"/api/services/{ID}", service_routes.get_service),
    ("PUT", rf"/api/services/{ID}", service_routes.update_service),
    ("DELETE", rf"/api/services/{ID}", service_routes.delete_service),
    ("GET", r"/api/recurring-services", recurring_service_routes.list_recurring_services),
    ("POST", r"/api/recurring-services", recurring_service_routes.create_recurring_service),
    (
        "POST",
        rf"/api/recurring-services/{ID}/activate",
        recurring_service_routes.activate_recurring_service,
    ),
    (
        "POST",
        rf"/api/recurring-services/{ID}/deactivate",
        recurring_service_routes.deactivate_recurring_service,
    ),
    ("GET", rf"/api/recurring-services/{ID}", recurring_service_routes.get_recurring_service),
    ("PUT", rf"/api/recurring-services/{ID}", recurring_service_routes.update_recurring_service),
    (
        "DELETE",
        rf"/api/recurring-services/{ID}",
        recurring_service_routes.delete_recurring_service,
    ),
)


class ApiRouter:
    """
    Match `METHOD /path` against the route table and run the handler.

    The service registry is injected; when none is given it is built on first
    use from the configured database engine, so /health works without one.
    """

    def __init__(self, registry=None):
        self._registry = registry
        self._routes: Tuple[Tuple[str, Pattern, Callable], ...] = tuple(
            (method, re.compile(rf"^{pattern}/?$"), handler)
            for method, pattern, handler in ROUTES
        )

    @property
    def registry(self):
        if self._registry is None:
            from services.registry import ServiceRegistry
            from utils.database import get_db_engine

            self._registry = ServiceRegistry.from_engine(get_db_engine())
        return self._registry

    def match(self, method: str, path: str) -> Optional[Tuple[Callable, Dict[str, str]]]:
        for route_method, pattern, handler in self._routes:
            if route_method != method:
                continue
            found = pattern.match(path)
            if found:
                return handler, found.groupdict()
        return None

    def __call__(self, event, context):
        http = event.get("requestContext", {}).get("http", {})
        method = http.get("method", "").upper()
        path = http.get("path", "")
        route_key = f"{method} {path}"

        if method == "GET" and path.rstrip("/") == "/health":
            return health_check.lambda_handler(event, context)

        matched = self.match(method, path)
        if matched is None:
            return json_response(404, {"error": "Route not found", "route": route_key})

        handler, path_params = matched
        event = dict(event, pathParameters={**(event.get("pathParameters") or {}), **path_params})
        try:
            return handler(event, self.registry)
        except AppError as exc:
            if exc.status_code >= 500:
                logger.error("Request failed", extra={"route": route_key, "error": str(exc)})
            else:
                logger.warning(
                    "Request rejected",
                    extra={"route": route_key, "kind": exc.kind, "error": str(exc)},
                )
            return to_response(exc)
        except PydanticValidationError as exc:
            error = from_pydantic(exc)
            logger.warning("Request rejected", extra={"route": route_key, "error": str(error)})
            return to_response(error)
        except Exception:
            logger.exception("Unhandled error", extra={"route": route_key})
            return to_response(InternalError())


_router = ApiRouter()


def lambda_handler(event, context):
    """
    Entry point invoked by API Gateway HTTP API.

    The event contains the HTTP method and path; we route it to the correct
    handler while keeping shared setup (logging, error handling) centralized.
    """
    return _router(event, context)
