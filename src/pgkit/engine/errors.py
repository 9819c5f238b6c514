"""pgkit exception hierarchy.

Hierarchy::

    PgkitError
    ├── BadSymbolError     - identifier contains a disallowed character
    ├── CatalogQueryError  - catalog query produced no result row
    └── CombinedError      - several failures raised by one call

Driver errors (``psycopg.Error`` and friends) are never wrapped; they reach
the caller as raised, or inside a ``CombinedError`` when a cleanup step
failed as well.
"""

from __future__ import annotations

from typing import Iterable

ERRF_BAD_SYMBOL = "Bad Symbol: '{}'."


class PgkitError(Exception):
    """Base exception for all pgkit errors."""


class BadSymbolError(PgkitError, ValueError):
    """Raised when an identifier contains a character outside [A-Za-z0-9_]."""

    def __init__(self, symbol: str, label: str = "identifier") -> None:
        super().__init__(ERRF_BAD_SYMBOL.format(symbol))
        self.symbol = symbol
        self.label = label


class CatalogQueryError(PgkitError):
    """Raised when an existence query returns no row to read."""


class CombinedError(PgkitError):
    """Several errors raised while serving a single call.

    ``errors`` keeps them in the order they happened: the operation's own
    failure first, then cleanup failures.
    """

    def __init__(self, errors: Iterable[BaseException]) -> None:
        self.errors: tuple[BaseException, ...] = tuple(errors)
        super().__init__("; ".join(_describe(e) for e in self.errors))


def _describe(error: BaseException) -> str:
    text = str(error)
    return f"{type(error).__name__}: {text}" if text else type(error).__name__


def combine_errors(*errors: BaseException | None) -> BaseException | None:
    """Merge errors so none of them is lost.

    ``None`` entries are skipped. Returns ``None`` when nothing is left, the
    error itself when only one is left, and a ``CombinedError`` otherwise.
    Nested ``CombinedError`` values are flattened.
    """
    flat: list[BaseException] = []
    for error in errors:
        if error is None:
            continue
        if isinstance(error, CombinedError):
            flat.extend(error.errors)
        else:
            flat.append(error)

    if not flat:
        return None
    if len(flat) == 1:
        return flat[0]
    return CombinedError(flat)
