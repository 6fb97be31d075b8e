"""Handlers for /api/customers."""

from models.customer import CustomerCreate, CustomerFilters, CustomerUpdate
from utils.http import (
    empty_response,
    json_body,
    json_response,
    lenient_int,
    optional_str,
    path_param,
    query_params,
)


def list_customers(event, registry):
    """GET /api/customers?search=&billing_model=&limit=&offset="""
    params = query_params(event)
    filters = CustomerFilters(
        search=optional_str(params, "search"),
        billing_model=optional_str(params, "billing_model"),
        limit=lenient_int(params, "limit"),
        offset=lenient_int(params, "offset"),
    )
    return json_response(200, registry.customers.list(filters))


def get_customer(event, registry):
    return json_response(200, registry.customers.get(path_param(event)))


def create_customer(event, registry):
    data = CustomerCreate.model_validate(json_body(event))
    return json_response(201, registry.customers.create(data))


def update_customer(event, registry):
    patch = CustomerUpdate.model_validate(json_body(event))
    return json_response(200, registry.customers.update(path_param(event), patch))


def delete_customer(event, registry):
    registry.customers.delete(path_param(event))
    return empty_response()


def customer_history(event, registry):
    """GET /api/customers/{id}/history: the customer's visits, newest first."""
    limit = lenient_int(query_params(event), "limit")
    return json_response(200, registry.customers.history(path_param(event), limit))
