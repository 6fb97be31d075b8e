import json

from handlers import health_check


def test_health_check_returns_ok():
    resp = health_check.lambda_handler({}, None)
    assert resp["statusCode"] == 200
    assert "ok" in resp["body"]


def test_health_check_reports_environment(monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "staging")
    body = json.loads(health_check.lambda_handler({}, None)["body"])
    assert body["service"] == "pool-service-api"
    assert body["environment"] == "staging"
    assert body["timestamp"]
