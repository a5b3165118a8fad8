"""
People table statements.

Every function here runs inside a transaction and receives the driver's
statement executor (`execute_statement(statement, *parameters)`). The unit
of work builders at the bottom compose them into retry-safe transactions.
"""

import logging
import re
from typing import Any, Callable, Dict, List, Optional

from ..core.utils import ion_to_native
from ..models.person import Person

logger = logging.getLogger("journal.people")

TABLE_NAME = "People"
INDEX_FIELD = "firstName"

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def _identifier(name: str) -> str:
    # DDL cannot take parameters, so names are validated before formatting.
    if not _IDENTIFIER.match(name):
        raise ValueError(f"Invalid identifier: {name!r}")
    return name


def _rows(cursor) -> List[Any]:
    return [ion_to_native(row) for row in cursor]


def table_exists(executor, table: str = TABLE_NAME) -> bool:
    rows = _rows(
        executor.execute_statement(
            "SELECT name FROM information_schema.user_tables WHERE name = ? AND status = 'ACTIVE'",
            table,
        )
    )
    return len(rows) > 0


def create_table(executor, table: str = TABLE_NAME) -> None:
    logger.info(f"Creating table {table}")
    executor.execute_statement(f"CREATE TABLE {_identifier(table)}")


def create_index(executor, table: str = TABLE_NAME, field: str = INDEX_FIELD) -> None:
    logger.info(f"Creating index on {table}.{field}")
    executor.execute_statement(f"CREATE INDEX ON {_identifier(table)} ({_identifier(field)})")


def ensure_schema(executor) -> bool:
    """Create the People table and its index unless present. Returns True if created."""
    if table_exists(executor):
        return False
    create_table(executor)
    create_index(executor)
    return True


def insert_document(executor, person: Person, table: str = TABLE_NAME) -> List[str]:
    """Insert the person and return the new document IDs."""
    logger.info(f"Inserting document for {person.first_name}")
    rows = _rows(
        executor.execute_statement(f"INSERT INTO {_identifier(table)} ?", person.to_document())
    )
    return [row["documentId"] for row in rows if "documentId" in row]


def update_last_name(executor, first_name: str, last_name: str, table: str = TABLE_NAME) -> int:
    """Set lastName on every document with first_name. Returns the number of documents changed."""
    rows = _rows(
        executor.execute_statement(
            f"UPDATE {_identifier(table)} SET lastName = ? WHERE firstName = ?",
            last_name,
            first_name,
        )
    )
    logger.info(f"Updated {len(rows)} document(s) for {first_name}")
    return len(rows)


def fetch_by_first_name(executor, first_name: str, table: str = TABLE_NAME) -> List[Dict[str, Any]]:
    return _rows(
        executor.execute_statement(
            f"SELECT firstName, age, lastName FROM {_identifier(table)} WHERE firstName = ?",
            first_name,
        )
    )


def fetch_history(executor, first_name: str, table: str = TABLE_NAME) -> List[Dict[str, Any]]:
    """All committed revisions of the person's documents, oldest first per document."""
    return _rows(
        executor.execute_statement(
            "SELECT h.data, h.metadata.version AS version, h.metadata.txTime AS txTime "
            f"FROM history({_identifier(table)}) AS h WHERE h.data.firstName = ?",
            first_name,
        )
    )


# =============================================================================
# Units of work
# =============================================================================


def journal_unit_of_work(
    person: Person, new_last_name: Optional[str] = None
) -> Callable[[Any], List[Dict[str, Any]]]:
    """
    Build the journal transaction: insert the person if absent, optionally
    change their last name, then return the stored documents.
    """

    def journal(executor) -> List[Dict[str, Any]]:
        if not fetch_by_first_name(executor, person.first_name):
            insert_document(executor, person)
        if new_last_name:
            update_last_name(executor, person.first_name, new_last_name)
        return fetch_by_first_name(executor, person.first_name)

    return journal


def history_unit_of_work(first_name: str) -> Callable[[Any], List[Dict[str, Any]]]:
    def history(executor) -> List[Dict[str, Any]]:
        return fetch_history(executor, first_name)

    return history
