import logging

from rest_framework import status
from rest_framework.views import exception_handler as drf_exception_handler

from wallets.api.responses import error_response, server_error_response

logger = logging.getLogger(__name__)


def _message_for(payload, status_code):
    if isinstance(payload, dict) and "detail" in payload:
        return str(payload["detail"])
    if status_code == status.HTTP_400_BAD_REQUEST:
        return "Bad request."
    if status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        return "Method not allowed."
    return "Request failed."


def custom_exception_handler(exc, context):
    response = drf_exception_handler(exc, context)

    if response is None:
        view = context.get("view")
        logger.error(
            "event=api_unhandled_exception view=%s error=%s",
            view.__class__.__name__ if view is not None else None,
            exc.__class__.__name__,
            exc_info=exc,
        )
        return server_error_response()

    return error_response(
        _message_for(response.data, response.status_code),
        status_code=response.status_code,
    )
