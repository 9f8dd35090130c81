# Standard library imports
import logging
from contextlib import contextmanager
from typing import Callable, Iterator, Optional

# External package imports
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

# Local application imports
from ...domain.exceptions import ConflictError, StorageError

logger = logging.getLogger(__name__)


@contextmanager
def storage_errors(
    action: str,
    conflict_message: Optional[Callable[[IntegrityError], str]] = None,
) -> Iterator[None]:
    """
    Translate SQLAlchemy failures raised inside the block into domain errors.
    
    A unique constraint violation becomes ConflictError when
    ``conflict_message`` is given; everything else becomes StorageError with
    a generic message (details go to the log only).
    """
    try:
        yield
    except IntegrityError as e:
        if conflict_message is None:
            logger.error(f"Integrity error {action}: {e}")
            raise StorageError(f"Error {action}") from e
        raise ConflictError(conflict_message(e)) from e
    except SQLAlchemyError as e:
        logger.error(f"Database error {action}: {e}", exc_info=True)
        raise StorageError(f"Error {action}") from e
