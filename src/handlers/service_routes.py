"""Handlers for /api/services, including the start/complete/skip actions."""

from models.service import ServiceCreate, ServiceFilters, ServiceUpdate, SkipRequest
from utils.http import (
    empty_response,
    json_body,
    json_response,
    lenient_date,
    lenient_int,
    optional_str,
    path_param,
    query_params,
)


def list_services(event, registry):
    params = query_params(event)
    filters = ServiceFilters(
        customer_id=optional_str(params, "customer_id"),
        status=optional_str(params, "status"),
        start_date=lenient_date(params, "start_date"),
        end_date=lenient_date(params, "end_date"),
        limit=lenient_int(params, "limit"),
        offset=lenient_int(params, "offset"),
    )
    return json_response(200, registry.services.list(filters))


def get_service(event, registry):
    return json_response(200, registry.services.get(path_param(event)))


def create_service(event, registry):
    data = ServiceCreate.model_validate(json_body(event))
    return json_response(201, registry.services.create(data))


def update_service(event, registry):
    patch = ServiceUpdate.model_validate(json_body(event))
    return json_response(200, registry.services.update(path_param(event), patch))


def delete_service(event, registry):
    registry.services.delete(path_param(event))
    return empty_response()


def start_service(event, registry):
    return json_response(200, registry.services.start(path_param(event)))


def complete_service(event, registry):
    return json_response(200, registry.services.complete(path_param(event)))


def skip_service(event, registry):
    """POST /api/services/{id}/skip with an optional {"reason": "..."} body."""
    request = SkipRequest.model_validate(json_body(event))
    return json_response(200, registry.services.skip(path_param(event), request.reason))
