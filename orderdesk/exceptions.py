"""
Errors raised by the order handlers.

Every error is an `APIException` so DRF's `handle_exception` renders it;
`exception_handler` below reshapes the payload into the `{"message": ...}`
body the orders API answers with.
"""
import logging

from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.views import exception_handler as drf_exception_handler

logger = logging.getLogger(__name__)


class FieldsRequired(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "All fields are required"
    default_code = "fields_required"


class OrderIdRequired(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Order ID required"
    default_code = "order_id_required"


class InvalidOrderData(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Invalid order data received"
    default_code = "invalid_order_data"

    def __init__(self, errors=None, detail=None, code=None):
        super().__init__(detail, code)
        self.errors = errors


class OrderNotFound(APIException):
    # Unknown ids are reported as bad requests, not 404s.
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Order not found"
    default_code = "order_not_found"


class NoOrdersFound(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "No orders found"
    default_code = "no_orders_found"


class DuplicateTableNo(APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "Duplicate order tableNo"
    default_code = "duplicate_table_no"


def exception_handler(exc, context):
    """
    Returns the response that should be used for any given exception.

    Delegates to DRF's handler and rewrites the body as `{"message": ...}`,
    adding `"errors"` when field level details are available. Exceptions
    DRF does not know about are logged and left to propagate.
    """
    response = drf_exception_handler(exc, context)

    if response is None:
        view = context.get("view")
        logger.error(
            "Unhandled error in %s",
            view.__class__.__name__ if view is not None else "view",
            exc_info=exc,
        )
        return None

    detail = response.data
    errors = getattr(exc, "errors", None)

    if isinstance(detail, dict) and "detail" in detail:
        message = detail["detail"]
    elif isinstance(detail, (dict, list)):
        message = InvalidOrderData.default_detail
        errors = detail
    else:
        message = detail

    data = {"message": str(message)}
    if errors:
        data["errors"] = errors
    response.data = data
    return response
