"""
Failure kinds surfaced by the API and the handler that renders them.

Every failure leaves a view as ``{"ok": false, "error": <kind>, "message": <text>}``:

- ``validation_error`` (400): malformed or missing input, first failing field reported
- ``not_found`` (404): a referenced record does not exist
- ``transaction_failure`` (500): an atomic master/detail write was rolled back
- ``unknown_failure`` (500): anything else the store or the code raised
"""

import logging
import re

from django.core.exceptions import ObjectDoesNotExist, PermissionDenied
from django.http import Http404
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class TransactionFailure(exceptions.APIException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = 'The transaction was aborted and no changes were saved.'
    default_code = 'transaction_failure'


class UnknownFailure(exceptions.APIException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = 'An unexpected error occurred.'
    default_code = 'unknown_failure'


def _snake_case(name):
    return re.sub(r'(?<!^)(?=[A-Z])', '_', name).lower()


def error_kind(exc):
    """Map an exception onto the failure kind reported to clients."""
    if isinstance(exc, exceptions.ValidationError):
        return 'validation_error'
    if isinstance(exc, (exceptions.NotFound, Http404, ObjectDoesNotExist)):
        return 'not_found'
    if isinstance(exc, (TransactionFailure, UnknownFailure)):
        return exc.default_code
    return _snake_case(type(exc).__name__)


def first_error_message(detail, path=''):
    """
    Return the first message found in a (possibly nested) DRF error detail.

    Nested field messages are prefixed with their path, e.g.
    ``items.0.quantity: Ensure this value is greater than or equal to 1.``
    ``non_field_errors`` are reported without a prefix.
    """
    if isinstance(detail, dict):
        for key, value in detail.items():
            if key == 'non_field_errors':
                child = path
            else:
                child = f"{path}.{key}" if path else str(key)
            message = first_error_message(value, child)
            if message:
                return message
        return ''
    if isinstance(detail, (list, tuple)):
        for index, value in enumerate(detail):
            child = path
            if isinstance(value, (dict, list)):
                child = f"{path}.{index}" if path else str(index)
            message = first_error_message(value, child)
            if message:
                return message
        return ''
    if not detail:
        return ''
    return f"{path}: {detail}" if path else str(detail)


def readable_message(exc):
    """``str(exc)`` when it reads as text, else the generic failure message."""
    message = str(exc).strip()
    if not message or not message[0].isalnum():
        return UnknownFailure.default_detail
    return message


def failure_body(kind, message):
    return {'ok': False, 'error': kind, 'message': message}


def api_exception_handler(exc, context):
    """
    REST framework exception handler producing the structured failure envelope.

    Unclassified exceptions are logged and reported as ``unknown_failure``
    instead of propagating as a bare server error.
    """
    if isinstance(exc, ObjectDoesNotExist):
        exc = exceptions.NotFound(str(exc) or 'Record not found')

    response = exception_handler(exc, context)
    view = context.get('view')
    view_name = type(view).__name__ if view is not None else 'unknown view'

    if response is None:
        logger.error(f"[UNHANDLED ERROR] {view_name}: {exc}", exc_info=exc)
        return Response(
            failure_body('unknown_failure', readable_message(exc)),
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if isinstance(exc, Http404):
        kind, message = 'not_found', str(exc) or 'Not found.'
    elif isinstance(exc, PermissionDenied):
        kind, message = 'permission_denied', str(exc) or 'Permission denied.'
    else:
        kind = error_kind(exc)
        message = first_error_message(getattr(exc, 'detail', str(exc)))

    if response.status_code >= 500:
        logger.error(f"[API FAILURE] {view_name}: {kind} - {message}")
    else:
        logger.info(f"[API REJECTED] {view_name}: {kind} - {message}")

    response.data = failure_body(kind, message)
    return response
