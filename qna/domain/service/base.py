"""Base service class for domain services."""

from contextlib import contextmanager
from typing import Iterator

import logfire
from sqlalchemy.exc import SQLAlchemyError

from qna.domain.error import StorageError


class Service:
    """Base class for all domain services.

    Domain services contain business logic that doesn't naturally belong
    to a single entity or spans multiple entities/aggregates.
    """

    pass


@contextmanager
def storage_errors(operation: str) -> Iterator[None]:
    """Translate storage engine failures into StorageError.

    Args:
        operation: Name of the operation, used in the error and log event

    Raises:
        StorageError: If the wrapped block raises a database or socket error
    """
    try:
        yield
    except (SQLAlchemyError, OSError) as e:
        logfire.error(
            "Storage operation failed",
            operation=operation,
            error=str(e),
            error_type=type(e).__name__,
        )
        raise StorageError(operation) from e
