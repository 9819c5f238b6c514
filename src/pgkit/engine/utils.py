"""Identifier validation and string-literal escaping."""

from __future__ import annotations

import string

from pgkit.engine.errors import BadSymbolError

IDENTIFIER_SYMBOLS = frozenset(string.ascii_letters + string.digits + "_")

SINGLE_QUOTE = "'"
SINGLE_QUOTE_TWICE = SINGLE_QUOTE + SINGLE_QUOTE


def validate_identifier(value: str, label: str = "identifier") -> str:
    """Validate that a value only uses safe SQL identifier characters.

    Allows ASCII letters, digits and underscores. Raises BadSymbolError on the
    first other character and returns the value unchanged otherwise.

    Identifiers cannot be sent as bound parameters, so anything interpolated
    into SQL as a table or procedure name goes through here first. This is a
    character whitelist, not a grammar check: leading digits, length and
    reserved words are not looked at, and the empty string passes.
    """
    for symbol in value:
        if symbol not in IDENTIFIER_SYMBOLS:
            raise BadSymbolError(symbol, label)
    return value


def validate_table_name(table_name: str) -> str:
    return validate_identifier(table_name, "table name")


def validate_procedure_name(procedure_name: str) -> str:
    return validate_identifier(procedure_name, "procedure name")


def is_identifier_good(value: str) -> bool:
    """Non-raising form of validate_identifier."""
    return all(symbol in IDENTIFIER_SYMBOLS for symbol in value)


def escape_single_quotes(src: str) -> str:
    """Double every single quote so *src* can sit inside a '...' literal.

    Only quotes are touched. Prefer bound parameters wherever the driver
    allows them.
    """
    return src.replace(SINGLE_QUOTE, SINGLE_QUOTE_TWICE)
