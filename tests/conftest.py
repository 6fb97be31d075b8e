"""
Pytest configuration to ensure paths are set up correctly for tests.

This allows imports like `from handlers import main` to work when running
tests, simulating the Lambda environment where code is deployed from the
src/ directory. Handler tests run against an in-memory SQLite database built
from the production table metadata.
"""

import json
import os
import sys
from pathlib import Path

import pytest


def _ensure_paths_on_sys_path() -> None:
    """Add repository root AND src/ to sys.path if missing.

    The src/ directory is added to simulate Lambda's import behavior,
    where Code.from_asset("src") makes src/ the root of the package.
    """
    repo_root = Path(__file__).resolve().parents[1]
    src_root = repo_root / "src"

    # Add repo root first (for imports like infrastructure.*)
    root_str = str(repo_root)
    if root_str not in sys.path:
        sys.path.insert(0, root_str)

    # Add src/ for Lambda-style imports (from handlers import ...)
    src_str = str(src_root)
    if src_str not in sys.path:
        sys.path.insert(0, src_str)


_ensure_paths_on_sys_path()

# Offline-friendly defaults so nothing reaches AWS during tests.
os.environ.setdefault("AWS_REGION", "eu-west-2")
os.environ.setdefault("AWS_DEFAULT_REGION", "eu-west-2")
os.environ.setdefault("AWS_ACCESS_KEY_ID", "test")
os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "test")
os.environ.setdefault("ENVIRONMENT", "dev")
os.environ.setdefault("LOG_LEVEL", "WARNING")


@pytest.fixture
def engine():
    """Fresh in-memory database with foreign keys enforced."""
    from repositories.schema import create_all
    from utils.database import create_db_engine

    engine = create_db_engine("sqlite://")
    create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def registry(engine):
    from services.registry import ServiceRegistry

    return ServiceRegistry.from_engine(engine)


@pytest.fixture
def router(registry):
    from handlers.main import ApiRouter

    return ApiRouter(registry)


def make_event(method, path, body=None, query=None):
    """Build an API Gateway HTTP API (v2) proxy event."""
    return {
        "requestContext": {"http": {"method": method, "path": path}},
        "queryStringParameters": query,
        "body": json.dumps(body) if body is not None else None,
        "isBase64Encoded": False,
    }


class ApiClient:
    """Drive the router the way API Gateway would and decode the answer."""

    def __init__(self, router):
        self.router = router

    def call(self, method, path, body=None, query=None):
        resp = self.router(make_event(method, path, body, query), None)
        payload = json.loads(resp["body"]) if resp["body"] else None
        return resp["statusCode"], payload

    def get(self, path, query=None):
        return self.call("GET", path, query=query)

    def post(self, path, body=None):
        return self.call("POST", path, body=body)

    def put(self, path, body=None):
        return self.call("PUT", path, body=body)

    def delete(self, path):
        return self.call("DELETE", path)


@pytest.fixture
def api(router):
    return ApiClient(router)


@pytest.fixture
def customer(api):
    """A stored customer to hang services and rules off."""
    status, body = api.post(
        "/api/customers",
        {"name": "Test Customer", "address": "123 Test St", "phone": "555-0100"},
    )
    assert status == 201
    return body
