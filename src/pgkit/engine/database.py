"""PostgreSQL connection management (psycopg 3)."""

from __future__ import annotations

import logging

import psycopg

from pgkit.engine.secrets import redact_dsn

logger = logging.getLogger("pgkit.database")


def connect(dsn: str, autocommit: bool = True) -> psycopg.Connection:
    """Open a psycopg connection to the given DSN.

    Autocommit is on by default so a failed catalog query does not leave the
    session in an aborted transaction.
    """
    logger.debug("Connecting to %s", redact_dsn(dsn))
    return psycopg.connect(dsn, autocommit=autocommit)
