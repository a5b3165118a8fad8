"""
Where: ledger_journal/journal/tests/test_clients.py
What: Unit tests for the boto3 client and QldbDriver factories.
Why: Keep the connection pool sized to the transaction limit.
"""

import botocore.session
from pyqldb.config.retry_config import RetryConfig

from ledger_journal.journal import clients
from ledger_journal.journal.config import JournalConfig


def _config(**overrides) -> JournalConfig:
    return JournalConfig(_env_file=None, **overrides)


def test_create_qldb_client_uses_config(monkeypatch) -> None:
    captured: dict = {}

    def fake_client(service, **kwargs):
        captured["service"] = service
        captured["kwargs"] = kwargs
        return object()

    monkeypatch.setattr("ledger_journal.journal.clients.boto3.client", fake_client)
    clients.create_qldb_client(_config(AWS_REGION="eu-west-1"))

    assert captured["service"] == "qldb"
    assert captured["kwargs"]["region_name"] == "eu-west-1"
    assert captured["kwargs"]["endpoint_url"] is None


def test_create_qldb_client_endpoint_override(monkeypatch) -> None:
    captured: dict = {}
    monkeypatch.setattr(
        "ledger_journal.journal.clients.boto3.client",
        lambda service, **kwargs: captured.update(kwargs),
    )

    clients.create_qldb_client(_config(QLDB_ENDPOINT_URL="http://localhost:4566"))

    assert captured["endpoint_url"] == "http://localhost:4566"


def test_create_qldb_driver_sizes_pool_and_retries(monkeypatch) -> None:
    captured: dict = {}

    class FakeQldbDriver:
        def __init__(self, **kwargs):
            captured.update(kwargs)

    monkeypatch.setattr("ledger_journal.journal.clients.QldbDriver", FakeQldbDriver)
    clients.create_qldb_driver(
        _config(
            LEDGER_NAME="ledger-a",
            AWS_REGION="us-east-1",
            MAX_CONCURRENT_TRANSACTIONS=7,
            RETRY_LIMIT=2,
        )
    )

    assert captured["ledger_name"] == "ledger-a"
    assert captured["max_concurrent_transactions"] == 7
    assert captured["config"].max_pool_connections == 7
    assert isinstance(captured["retry_config"], RetryConfig)
    assert captured["retry_config"].retry_limit == 2
    assert captured["region_name"] == "us-east-1"


def test_installed_botocore_ships_qldb_models() -> None:
    services = botocore.session.get_session().get_available_services()

    assert "qldb" in services
    assert "qldb-session" in services
