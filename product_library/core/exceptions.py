"""
Application Exception Handling

Single AppException class for all API errors with FastAPI integration.
The catalog functions themselves never raise; controllers turn their
None/False results into these exceptions.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse


class AppException(Exception):
    """
    Unified application exception for all error scenarios.

    Provides consistent error response format across the entire API.

    Usage:
        raise AppException("Product not found", "PRODUCT_NOT_FOUND", 404)

    Error Codes:
        Products:
            - PRODUCT_NOT_FOUND (404)
            - SKU_NOT_FOUND (404)
            - PRODUCT_NAME_REQUIRED (422)

        Company catalog:
            - EMPTY_SELECTION (400)

        Categories:
            - CATEGORY_NOT_FOUND (404)

        General:
            - CATALOG_NOT_LOADED (500)
    """

    def __init__(
        self,
        message: str,
        code: str,
        status_code: int = 400,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize application exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code (e.g., "PRODUCT_NOT_FOUND")
            status_code: HTTP status code (default: 400)
            details: Additional error context (optional)
        """
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        self.timestamp = datetime.now(timezone.utc).isoformat()
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON response."""
        error_dict = {
            "success": False,
            "error": {
                "code": self.code,
                "message": self.message,
                "timestamp": self.timestamp
            }
        }

        if self.details:
            error_dict["error"]["details"] = self.details

        return error_dict


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Convert AppException to a JSON error response."""
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register all exception handlers with FastAPI app.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(AppException, app_exception_handler)


# ============================================
# CONVENIENCE FACTORY FUNCTIONS
# ============================================

def product_not_found(product_id: Optional[str] = None) -> AppException:
    """Create product not found exception."""
    details = {"product_id": product_id} if product_id else {}
    return AppException("Product not found", "PRODUCT_NOT_FOUND", 404, details)


def sku_not_found(product_id: str, sku_id: str) -> AppException:
    """Create SKU not found exception."""
    return AppException(
        "SKU not found",
        "SKU_NOT_FOUND",
        404,
        {"product_id": product_id, "sku_id": sku_id}
    )


def product_name_required(product_id: Optional[str] = None) -> AppException:
    """Create exception for a save rejected because the name is empty."""
    details = {"product_id": product_id} if product_id else {}
    return AppException(
        "Product name is required",
        "PRODUCT_NAME_REQUIRED",
        422,
        details
    )


def empty_selection() -> AppException:
    """Create exception for an import without any selected product."""
    return AppException(
        "Select at least one product to import",
        "EMPTY_SELECTION",
        400
    )


def category_not_found(category_id: Optional[str] = None) -> AppException:
    """Create category not found exception."""
    details = {"category_id": category_id} if category_id else {}
    return AppException("Category not found", "CATEGORY_NOT_FOUND", 404, details)


def catalog_not_loaded() -> AppException:
    """Create catalog not loaded exception."""
    return AppException(
        "Product catalog not loaded",
        "CATALOG_NOT_LOADED",
        500
    )

