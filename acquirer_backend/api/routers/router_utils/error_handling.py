"""
Router error handling utilities.

Provides a decorator translating domain exceptions into HTTPExceptions
with consistent status codes across merchant, user and DFSP endpoints.

Dependencies: fastapi, sqlalchemy, acquirer_backend.core.exceptions
System role: Domain error → HTTP status mapping
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status
from sqlalchemy.exc import SQLAlchemyError

from acquirer_backend.core.exceptions import (
    AcquirerException,
    AuthenticationError,
    EntityNotFoundError,
    InvalidCredentialsError,
    OwnershipError,
    StorageError,
    ValidationError,
)
from acquirer_backend.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])


def handle_acquirer_errors(func: F) -> F:
    """
    Decorator to handle domain errors and transform them into HTTPExceptions.

    Mapping:
    - HTTPException: passed through unchanged
    - EntityNotFoundError: 404
    - OwnershipError, AuthenticationError: 401
    - InvalidCredentialsError: 400
    - ValidationError (duplicate alias, illegal status, bad document): 422
    - StorageError: 502
    - SQLAlchemyError: 500 "Database error"
    - anything else: 500, logged with traceback
    """

    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except HTTPException:
            raise

        except EntityNotFoundError as e:
            logger.warning("Resource not found", extra={"error": e.message})
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)

        except (OwnershipError, AuthenticationError) as e:
            logger.warning("Unauthorized merchant operation", extra={"error": e.message})
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=e.message)

        except InvalidCredentialsError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

        except ValidationError as e:
            logger.warning("Invalid request", extra={"error": e.message, "details": e.details})
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail=e.message,
            )

        except StorageError as e:
            logger.error("Object storage failure", extra={"error": str(e)})
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail="Document storage unavailable",
            )

        except AcquirerException as e:
            logger.error("Unhandled domain error", extra={"error": str(e)})
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

        except SQLAlchemyError as e:
            logger.exception("Database failure", extra={"error": str(e)})
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Database error",
            )

        except Exception as e:
            log_exception_with_context(
                logger, "Unexpected failure in request handler", e, handler=func.__name__
            )
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="An internal error occurred",
            )

    return wrapper  # type: ignore
