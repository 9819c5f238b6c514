"""Core helpers: DSN builder, identifier checks, catalog existence queries.

Nothing here holds state between calls; the catalog helpers take a
caller-owned connection and never close it.
"""

from __future__ import annotations

from pgkit.engine.catalog import procedure_exists, table_exists
from pgkit.engine.dsn import make_postgresql_dsn
from pgkit.engine.errors import (
    BadSymbolError,
    CatalogQueryError,
    CombinedError,
    PgkitError,
    combine_errors,
)
from pgkit.engine.utils import (
    escape_single_quotes,
    is_identifier_good,
    validate_identifier,
    validate_procedure_name,
    validate_table_name,
)

__all__ = [
    "BadSymbolError",
    "CatalogQueryError",
    "CombinedError",
    "PgkitError",
    "combine_errors",
    "escape_single_quotes",
    "is_identifier_good",
    "make_postgresql_dsn",
    "procedure_exists",
    "table_exists",
    "validate_identifier",
    "validate_procedure_name",
    "validate_table_name",
]
