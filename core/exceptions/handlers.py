"""
DRF Exception Handler
=====================

Turns ``QuillError`` subtypes raised anywhere below a view into
``{error, message, detail}`` JSON responses.

Registered in ``REST_FRAMEWORK["EXCEPTION_HANDLER"]``.
"""

import logging
from rest_framework.views import exception_handler as drf_exception_handler
from rest_framework.response import Response

from .base import QuillError

logger = logging.getLogger(__name__)


def quill_exception_handler(exc, context):
    """
    Custom DRF exception handler.

    - ``QuillError`` subtype → structured JSON with the error's status code.
    - Standard DRF exceptions → DRF's default handler.
    - Anything neither layer handles is logged with its traceback and
      re-raised by DRF (``None`` response).
    """
    if isinstance(exc, QuillError):
        logger.warning(
            "QuillError [%s]: %s %s",
            exc.error_code,
            exc.message,
            exc.details or "",
        )
        return Response(exc.to_dict(), status=exc.status_code)

    response = drf_exception_handler(exc, context)

    if response is None:
        logger.exception("Unhandled exception in %s", context.get("view", "unknown"))

    return response
