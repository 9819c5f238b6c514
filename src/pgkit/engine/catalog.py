"""Existence checks against the PostgreSQL catalogs.

Both checks take a caller-owned DB-API connection (psycopg 3 in practice),
open one cursor for the call, and close it on every exit path. A failure to
close is merged with whatever else went wrong instead of replacing it.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Sequence

from pgkit.engine.errors import CatalogQueryError, combine_errors

logger = logging.getLogger("pgkit.catalog")

# Wire form of the catalog queries.
TABLE_EXISTS_QUERY = (
    "SELECT EXISTS (SELECT 1 FROM information_schema.tables "
    "WHERE table_schema = $1 AND table_name = $2);"
)
PROCEDURE_EXISTS_QUERY = (
    "SELECT EXISTS (SELECT 1 FROM pg_catalog.pg_proc "
    "JOIN pg_namespace ON pg_catalog.pg_proc.pronamespace = pg_namespace.oid "
    "WHERE pg_proc.proname = $1 AND pg_namespace.nspname = $2);"
)

_POSITIONAL_PARAM_RE = re.compile(r"\$\d+")


def to_driver_placeholders(query: str) -> str:
    """Rewrite ``$1, $2, ...`` as DB-API ``%s`` placeholders.

    Placeholders must appear in ascending order. psycopg 3 turns ``%s`` back
    into ``$n`` with server-side binding, so the server sees the text above.
    """
    return _POSITIONAL_PARAM_RE.sub("%s", query)


def _query_exists(connection: Any, query: str, params: Sequence[str]) -> bool:
    cursor = connection.cursor()

    result = False
    error: BaseException | None = None
    try:
        cursor.execute(to_driver_placeholders(query), params)
        row = cursor.fetchone()
        if row is None:
            raise CatalogQueryError("Existence query returned no rows")
        result = bool(row[0])
    except Exception as e:
        error = e
    finally:
        try:
            cursor.close()
        except Exception as close_error:
            logger.warning("Failed to close catalog cursor: %s", close_error)
            error = combine_errors(error, close_error)

    if error is not None:
        raise error
    return result


def table_exists(connection: Any, schema_name: str, table_name: str) -> bool:
    """Check whether ``schema_name.table_name`` exists.

    Looks the name up in ``information_schema.tables`` using bound
    parameters, so neither value needs to be validated or quoted first.
    Driver errors propagate unchanged.
    """
    exists = _query_exists(connection, TABLE_EXISTS_QUERY, (schema_name, table_name))
    logger.debug("Table %s.%s exists: %s", schema_name, table_name, exists)
    return exists


def procedure_exists(connection: Any, schema_name: str, procedure_name: str) -> bool:
    """Check whether a procedure or function named ``procedure_name`` exists in ``schema_name``.

    Same contract as :func:`table_exists`, backed by ``pg_proc`` joined with
    ``pg_namespace``.
    """
    exists = _query_exists(
        connection, PROCEDURE_EXISTS_QUERY, (procedure_name, schema_name)
    )
    logger.debug("Procedure %s.%s exists: %s", schema_name, procedure_name, exists)
    return exists
