from enum import Enum

from sqlalchemy.exc import DBAPIError, DisconnectionError, IntegrityError, InterfaceError, OperationalError, SQLAlchemyError


class StoreErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    UNAVAILABLE = "unavailable"
    UNKNOWN = "unknown"


# Failures a statement can raise. Some driver errors (e.g. sqlite3's
# OverflowError on an integer too large to bind) reach us unwrapped.
STATEMENT_ERRORS = (SQLAlchemyError, OverflowError)

# Used in place of the driver's text when store errors are not exposed
CURATED_MESSAGES = {
    StoreErrorKind.CONFLICT: "Request conflicts with existing data",
    StoreErrorKind.UNAVAILABLE: "Database unavailable",
    StoreErrorKind.UNKNOWN: "Internal server error",
}


class StoreError(Exception):
    """A statement failed in the store; ``message`` is the driver's own text."""

    def __init__(self, kind: StoreErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    @classmethod
    def from_exception(cls, exc: Exception) -> "StoreError":
        if isinstance(exc, IntegrityError):
            kind = StoreErrorKind.CONFLICT
        elif isinstance(exc, (OperationalError, InterfaceError, DisconnectionError)):
            kind = StoreErrorKind.UNAVAILABLE
        else:
            kind = StoreErrorKind.UNKNOWN
        # SQLAlchemy decorates DBAPI errors with the statement and a docs link
        if isinstance(exc, DBAPIError) and exc.orig is not None:
            message = str(exc.orig).strip()
        else:
            message = str(exc)
        return cls(kind, message)


class ResourceNotFound(StoreError):
    """An id-scoped statement matched zero rows."""

    def __init__(self, resource: str):
        self.resource = resource
        super().__init__(StoreErrorKind.NOT_FOUND, f"{resource} not found")


def public_message(error: StoreError, expose: bool) -> str:
    # not-found messages are written by us, never driver text
    if expose or error.kind == StoreErrorKind.NOT_FOUND:
        return error.message
    return CURATED_MESSAGES[error.kind]
