from __future__ import annotations

from sqlalchemy.exc import DBAPIError, InterfaceError, OperationalError

_DISCONNECT_MARKERS = (
    "connection is closed",
    "connection was closed",
    "connection does not exist",
    "connection refused",
    "connect call failed",
    "server closed the connection",
    "could not connect to server",
    "no address associated with hostname",
    "the database system is starting up",
    "closed in the middle of operation",
)


def is_db_disconnect(exc: BaseException) -> bool:
    # QueryError and friends chain the store error
    cause = exc.__cause__
    if cause is not None and cause is not exc and is_db_disconnect(cause):
        return True

    # SQLAlchemy wrappers
    if isinstance(exc, (OperationalError, InterfaceError)):
        return True
    if (isinstance(exc, DBAPIError) and
            getattr(exc, "connection_invalidated", False)):
        return True

    msg = str(exc).lower()
    if isinstance(exc, OSError):
        return any(m in msg for m in _DISCONNECT_MARKERS)

    return "no address associated with hostname" in msg
