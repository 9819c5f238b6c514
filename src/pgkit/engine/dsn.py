"""PostgreSQL connection string (DSN) builder."""

from __future__ import annotations

DSN_PREFIX = "postgresql://"
DSN_USERNAME_PASSWORD_DELIMITER = ":"
DSN_USERNAME_HOST_DELIMITER = "@"
DSN_HOST_PORT_DELIMITER = ":"
DSN_HOST_DATABASE_DELIMITER = "/"
DSN_PARAMETERS_PREFIX = "?"


def make_postgresql_dsn(
    host: str,
    port: str | int,
    database: str = "",
    username: str = "",
    password: str = "",
    parameters: str = "",
) -> str:
    """Build a libpq connection URI.

    Format: ``postgresql://[user[:password]@]host:port[/dbname][?params]``
    (see https://www.postgresql.org/docs/current/libpq-connect.html).

    ``host`` and ``port`` are always written, even when empty. The password is
    only used together with a username. ``parameters`` is a ``key=value&...``
    list without the leading ``?`` and is appended verbatim.
    """
    dsn = DSN_PREFIX
    if username:
        dsn += username
        if password:
            dsn += DSN_USERNAME_PASSWORD_DELIMITER + password
        dsn += DSN_USERNAME_HOST_DELIMITER

    dsn += f"{host}{DSN_HOST_PORT_DELIMITER}{port}"

    if database:
        dsn += DSN_HOST_DATABASE_DELIMITER + database

    if parameters:
        dsn += DSN_PARAMETERS_PREFIX + parameters

    return dsn
