"""
Route error handling.

Decorator translating domain exceptions into HTTPExceptions so every
endpoint reports failures with the same status codes and logging.

Dependencies: fastapi, docqa.core.exceptions
System role: Exception-to-HTTP mapping for API routes
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status

from docqa.core.exceptions import (
    DocumentProcessingError,
    NotFoundError,
    ProviderTimeoutError,
    StorageError,
    UpstreamProviderError,
    ValidationError,
)

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def handle_service_errors(func: F) -> F:
    """
    Map service exceptions to HTTP responses.

    ValidationError and document processing errors -> 400,
    NotFoundError -> 404, ProviderTimeoutError -> 504,
    UpstreamProviderError -> 502, anything else -> 500.
    """

    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except HTTPException:
            raise

        except (ValidationError, DocumentProcessingError) as e:
            logger.warning("Invalid request", extra={"error": str(e)})
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

        except NotFoundError as e:
            logger.warning(
                "Resource not found",
                extra={"resource": e.resource, "identifier": e.identifier},
            )
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)

        except ProviderTimeoutError as e:
            logger.error("Provider timed out", extra={"stage": e.stage, "error": str(e)})
            raise HTTPException(status_code=status.HTTP_504_GATEWAY_TIMEOUT, detail=e.message)

        except UpstreamProviderError as e:
            logger.error("Provider failed", extra={"stage": e.stage, "error": str(e)})
            raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=e.message)

        except StorageError as e:
            logger.error("Storage failure", extra={"operation": e.operation, "error": str(e)})
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="A storage error occurred",
            )

        except Exception as e:
            logger.exception("Unexpected failure", extra={"error": str(e)})
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="An internal error occurred",
            )

    return wrapper  # type: ignore
