"""Handlers for /api/recurring-services."""

from models.recurring_service import (
    RecurringServiceCreate,
    RecurringServiceFilters,
    RecurringServiceUpdate,
)
from utils.http import (
    empty_response,
    json_body,
    json_response,
    lenient_bool,
    optional_str,
    path_param,
    query_params,
)


def list_recurring_services(event, registry):
    params = query_params(event)
    filters = RecurringServiceFilters(
        customer_id=optional_str(params, "customer_id"),
        is_active=lenient_bool(params, "is_active"),
        frequency=optional_str(params, "frequency"),
    )
    return json_response(200, registry.recurring.list(filters))


def get_recurring_service(event, registry):
    return json_response(200, registry.recurring.get(path_param(event)))


def create_recurring_service(event, registry):
    data = RecurringServiceCreate.model_validate(json_body(event))
    return json_response(201, registry.recurring.create(data))


def update_recurring_service(event, registry):
    patch = RecurringServiceUpdate.model_validate(json_body(event))
    return json_response(200, registry.recurring.update(path_param(event), patch))


def delete_recurring_service(event, registry):
    registry.recurring.delete(path_param(event))
    return empty_response()


def activate_recurring_service(event, registry):
    return json_response(200, registry.recurring.activate(path_param(event)))


def deactivate_recurring_service(event, registry):
    return json_response(200, registry.recurring.deactivate(path_param(event)))
