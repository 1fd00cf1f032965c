"""
Standard Error Handlers
======================
Map cube engine errors onto consistent API responses
"""

from typing import Dict, Any, Optional
from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse
import time
import uuid

from nxcube.exceptions import CubeError, ValidationError
from nxcube.logging import get_logger

logger = get_logger(__name__)


def _json_safe(details: Dict[str, Any]) -> Dict[str, Any]:
    """Stringify values JSON cannot carry (e.g. Move objects)"""
    safe = {}
    for key, value in details.items():
        if value is None or isinstance(value, (str, int, float, bool)):
            safe[key] = value
        else:
            safe[key] = str(value)
    return safe


class StandardErrorHandler:
    """Standard error handler for consistent API responses"""

    @staticmethod
    def create_error_response(
        status_code: int,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        error_id: Optional[str] = None
    ) -> JSONResponse:
        """Create a standardized error response"""
        content = {
            "detail": message,
            "error_code": error_code or f"error_{status_code}",
            "timestamp": time.time(),
            "error_id": error_id or str(uuid.uuid4())
        }

        if details:
            content["details"] = _json_safe(details)

        return JSONResponse(
            status_code=status_code,
            content=content
        )

    @staticmethod
    def handle_cube_error(request: Request, exc: CubeError) -> JSONResponse:
        """Invalid cube data is 422, any other engine error is a bad request"""
        status_code = 422 if isinstance(exc, ValidationError) else 400
        logger.info(
            "Cube request rejected",
            path=str(request.url.path),
            error_type=exc.error_type,
            message=exc.message,
        )
        return StandardErrorHandler.create_error_response(
            status_code=status_code,
            message=exc.message,
            error_code=exc.error_type,
            details=exc.details,
        )


def validation_error(message: str = "Validation failed") -> HTTPException:
    """Standard 422 Validation error"""
    return HTTPException(status_code=422, detail=message)
