# api/utils/errors.py
from fastapi import HTTPException, status
from typing import Optional, Dict, Any
import logging
import traceback

from wall_gap_adjuster.exceptions import WallAdjustmentError

logger = logging.getLogger("wall_gap.api")

UNSUPPORTED_CONFIGURATION = "not a supported configuration"

class APIError(Exception):
    """
    Error carrying the HTTP status and the `{detail, code}` body to send back.
    """
    def __init__(
        self,
        status_code: int,
        detail: str,
        internal_code: Optional[str] = None,
        extra: Optional[Dict[str, Any]] = None
    ):
        self.status_code = status_code
        self.detail = detail
        self.internal_code = internal_code
        self.extra = extra or {}
        super().__init__(detail)

    def to_http_exception(self) -> HTTPException:
        """Build the HTTPException FastAPI renders for this error."""
        body: Dict[str, Any] = {"detail": self.detail}
        if self.internal_code:
            body["code"] = self.internal_code
        if self.extra:
            body["extra"] = self.extra

        return HTTPException(status_code=self.status_code, detail=body)

class InvalidWallInputError(APIError):
    """A request wall could not be turned into an engine segment descriptor."""
    def __init__(self, wall_index: int, reason: str):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Wall {wall_index} is not a usable centerline: {reason}",
            internal_code="invalid_wall_input",
            extra={"wall_index": wall_index},
        )

class WallAdjustmentAPIError(APIError):
    """Engine rejected the request input (bad gap, degenerate wall, ...)."""
    def __init__(self, error: WallAdjustmentError):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(error),
            internal_code=error.error_code,
        )

def handle_exception(e: Exception, operation: str = "request") -> HTTPException:
    """
    Handle exceptions and convert to appropriate HTTPExceptions.

    Engine errors become 400 responses carrying their error code; anything
    unexpected is logged with its traceback and becomes a 500.

    Args:
        e: The exception to handle
        operation: Name of the operation that failed (for context)

    Returns:
        HTTPException with appropriate status code and details
    """
    # If it's already an APIError, just convert it
    if isinstance(e, APIError):
        return e.to_http_exception()

    # If it's already an HTTPException, return it
    if isinstance(e, HTTPException):
        return e

    if isinstance(e, WallAdjustmentError):
        logger.info("Rejected %s: [%s] %s", operation, e.error_code, e)
        return WallAdjustmentAPIError(e).to_http_exception()

    # Log the full error
    error_detail = traceback.format_exc()
    logger.error("Unhandled exception during %s: %s\n%s", operation, e, error_detail)

    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail={
            "detail": f"An unexpected error occurred: {str(e)}",
            "code": "internal_server_error",
            "operation": operation,
        }
    )
