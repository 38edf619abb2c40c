"""
Error hierarchy for the ERP API.

Every error carries a stable ``code`` and the HTTP status it maps to.
Business outcomes (4xx) are expected; only ``InternalFailure`` is treated
as unexpected and reported with a generic message.
"""

from typing import Any, Dict, Optional


class ERPError(Exception):
    """Base exception for all ERP errors"""

    code = "ERP_ERROR"
    http_status = 500

    def __init__(self, message: str, headers: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.message = message
        self.headers = headers

    def to_response(self) -> Dict[str, Any]:
        return {"detail": self.message, "code": self.code}


# ==================== AUTH ====================

class AuthError(ERPError):
    """Raised by the auth gate"""


class Unauthenticated(AuthError):
    code = "UNAUTHENTICATED"
    http_status = 401

    def __init__(self, message: str = "Could not validate credentials"):
        super().__init__(message, headers={"WWW-Authenticate": "Bearer"})


class Forbidden(AuthError):
    code = "FORBIDDEN"
    http_status = 403

    def __init__(self, message: str = "Not enough permissions"):
        super().__init__(message)


# ==================== REQUEST / RECORDS ====================

class ValidationError(ERPError):
    code = "VALIDATION_ERROR"
    http_status = 400


class ResourceNotFound(ERPError):
    code = "RESOURCE_NOT_FOUND"
    http_status = 404

    def __init__(self, resource_type: str, resource_id: Any):
        super().__init__(f"{resource_type} {resource_id} not found")
        self.resource_type = resource_type
        self.resource_id = resource_id


class Conflict(ERPError):
    code = "CONFLICT"
    http_status = 409


# ==================== SALES ====================

class SaleError(ERPError):
    """Raised by the sale processor; no partial state is left behind"""
    http_status = 400


class EmptyOrder(SaleError):
    code = "EMPTY_ORDER"

    def __init__(self):
        super().__init__("Sale must contain at least one item")


class ProductNotFound(SaleError):
    code = "PRODUCT_NOT_FOUND"
    http_status = 404

    def __init__(self, product_id: int):
        super().__init__(f"Product {product_id} not found")
        self.product_id = product_id


class ClientNotFound(SaleError):
    code = "CLIENT_NOT_FOUND"
    http_status = 404

    def __init__(self, client_id: int):
        super().__init__(f"Client {client_id} not found")
        self.client_id = client_id


class InsufficientStock(SaleError):
    code = "INSUFFICIENT_STOCK"

    def __init__(
        self,
        product_id: int,
        product_name: str,
        requested: int,
        available: Optional[int] = None
    ):
        message = f"Insufficient stock for {product_name}: requested {requested}"
        if available is not None:
            message += f", available {available}"
        super().__init__(message)
        self.product_id = product_id
        self.requested = requested
        self.available = available


# ==================== INFRASTRUCTURE ====================

class InternalFailure(ERPError):
    """Storage or unexpected failure; details stay in the logs"""
    code = "INTERNAL_FAILURE"
    http_status = 500

    def __init__(self, operation: str):
        super().__init__("An internal error occurred")
        self.operation = operation
