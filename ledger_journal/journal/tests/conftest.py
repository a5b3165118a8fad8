import os
from typing import Any, Callable, Dict, List, Optional

import pytest

# Config is initialized at import time, so pin the relevant env vars at top level.
os.environ.setdefault("AWS_DEFAULT_REGION", "us-east-1")
os.environ["LEDGER_NAME"] = "test-journal"
os.environ["LOG_CONFIG_PATH"] = "/tmp/journal-missing-logging.yaml"


class FakeStatusProvider:
    """Returns a scripted status sequence; the last value repeats."""

    def __init__(self, statuses: List[Any]):
        self.statuses = list(statuses)
        self.calls: List[str] = []

    async def __call__(self, resource_id: str) -> Any:
        self.calls.append(resource_id)
        index = min(len(self.calls), len(self.statuses)) - 1
        status = self.statuses[index]
        if isinstance(status, Exception):
            raise status
        return status


class RecordingSleep:
    def __init__(self):
        self.delays: List[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


class FakeStatementExecutor:
    """
    Stands in for the driver's transaction executor.

    `handler(statement, parameters)` returns the rows for each statement;
    every call is recorded.
    """

    def __init__(self, handler: Optional[Callable[[str, tuple], List[Any]]] = None):
        self.handler = handler or (lambda statement, parameters: [])
        self.statements: List[str] = []
        self.parameters: List[tuple] = []

    def execute_statement(self, statement: str, *parameters) -> List[Any]:
        self.statements.append(statement)
        self.parameters.append(parameters)
        return iter(self.handler(statement, parameters))


class FakeDriver:
    """Runs the lambda once with the given statement executor, like a commit on first try."""

    def __init__(self, executor: FakeStatementExecutor):
        self.executor = executor
        self.closed = False
        self.calls: List[tuple] = []

    def execute_lambda(self, query_lambda, *args):
        self.calls.append(args)
        return query_lambda(self.executor)

    def close(self):
        self.closed = True


class InMemoryPeople:
    """
    Minimal People table backing a FakeStatementExecutor, enough for the
    journal statements.
    """

    def __init__(self, table_exists: bool = False):
        self.table_exists = table_exists
        self.documents: List[Dict[str, Any]] = []
        self.revisions: List[Dict[str, Any]] = []

    def __call__(self, statement: str, parameters: tuple) -> List[Any]:
        if statement.startswith("SELECT name FROM information_schema.user_tables"):
            return [{"name": parameters[0]}] if self.table_exists else []
        if statement.startswith("CREATE TABLE"):
            self.table_exists = True
            return [{"tableId": "t-1"}]
        if statement.startswith("CREATE INDEX"):
            return [{"tableId": "t-1"}]
        if statement.startswith("INSERT INTO"):
            document = dict(parameters[0])
            self.documents.append(document)
            self._revise(document)
            return [{"documentId": f"doc-{len(self.documents)}"}]
        if statement.startswith("UPDATE"):
            last_name, first_name = parameters
            changed = []
            for i, doc in enumerate(self.documents):
                if doc["firstName"] == first_name:
                    doc["lastName"] = last_name
                    self._revise(doc)
                    changed.append({"documentId": f"doc-{i + 1}"})
            return changed
        if statement.startswith("SELECT firstName, age, lastName"):
            return [
                {"firstName": d["firstName"], "age": d["age"], "lastName": d["lastName"]}
                for d in self.documents
                if d["firstName"] == parameters[0]
            ]
        if "FROM history(" in statement:
            return [r for r in self.revisions if r["data"]["firstName"] == parameters[0]]
        raise AssertionError(f"Unexpected statement: {statement}")

    def _revise(self, document: Dict[str, Any]) -> None:
        version = sum(1 for r in self.revisions if r["data"]["firstName"] == document["firstName"])
        self.revisions.append({"data": dict(document), "version": version})


@pytest.fixture
def recording_sleep():
    return RecordingSleep()


@pytest.fixture
def people_table():
    return InMemoryPeople()


@pytest.fixture
def make_provider():
    return FakeStatusProvider


@pytest.fixture
def statement_executor(people_table):
    return FakeStatementExecutor(people_table)


@pytest.fixture
def fake_driver(statement_executor):
    return FakeDriver(statement_executor)
