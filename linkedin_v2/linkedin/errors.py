"""LinkedIn API exception definitions.

HTTP failures are mapped onto a closed set of error kinds by
``raise_for_linkedin_status``. Client-side usage problems (missing URN,
missing comment) are reported with ``UnavailableError`` before any request
is sent.
"""
import json
import logging
from enum import Enum
from typing import Any, Optional

logger = logging.getLogger(__name__)


class ErrorKind(str, Enum):
    """Error kinds derived from HTTP status codes."""
    UNAUTHORIZED = "Unauthorized"
    GENERAL_ERROR = "GeneralError"
    ACCESS_DENIED = "AccessDenied"
    NOT_FOUND = "NotFound"
    SERVER_ERROR = "ServerError"
    SERVICE_UNAVAILABLE = "ServiceUnavailable"


class LinkedInError(Exception):
    """Base class for every error raised by this package."""
    pass


class UnavailableError(LinkedInError):
    """Raised when a call is made without its required arguments."""
    pass


class LinkedInAPIError(LinkedInError):
    """Raised when LinkedIn answers with a classified error status."""

    kind: Optional[ErrorKind] = None

    def __init__(self, message: str, status_code: int, data: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.data = data if data is not None else {}


class UnauthorizedError(LinkedInAPIError):
    kind = ErrorKind.UNAUTHORIZED


class GeneralError(LinkedInAPIError):
    kind = ErrorKind.GENERAL_ERROR


class AccessDeniedError(LinkedInAPIError):
    kind = ErrorKind.ACCESS_DENIED


class NotFoundError(LinkedInAPIError):
    kind = ErrorKind.NOT_FOUND


class InformLinkedInError(LinkedInAPIError):
    """LinkedIn reported an internal server error."""
    kind = ErrorKind.SERVER_ERROR


class ServiceUnavailableError(LinkedInAPIError):
    kind = ErrorKind.SERVICE_UNAVAILABLE


# Statuses whose JSON body carries its own status and message
_BODY_ERRORS = {
    401: UnauthorizedError,
    400: GeneralError,
    403: AccessDeniedError,
}


def _decode_body(text: str) -> dict:
    try:
        data = json.loads(text)
    except (TypeError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def raise_for_linkedin_status(response: Any) -> None:
    """Raise the matching ``LinkedInAPIError`` for an error response.

    Statuses outside the mapped set (including every 2xx, and e.g. 429 or
    504) are left alone and the caller receives the response unexamined.

    Args:
        response: An ``httpx.Response``-like object exposing ``status_code``,
            ``text`` and ``reason_phrase``.

    Raises:
        LinkedInAPIError: One of its subclasses, depending on the status.
    """
    status = int(response.status_code)

    if status in _BODY_ERRORS:
        data = _decode_body(response.text)
        message = data.get("message") or response.text
        error_cls = _BODY_ERRORS[status]
        logger.warning(f"LinkedIn returned {status} ({error_cls.kind.value})")
        raise error_cls(f"({data.get('status', status)}): {message}", status, data)

    if status == 404:
        raise NotFoundError(f"({status}): {response.reason_phrase}", status)

    if status == 500:
        logger.error("LinkedIn returned an internal server error")
        raise InformLinkedInError(
            "LinkedIn had an internal error. Please let them know in the forum. "
            f"({status}): {response.reason_phrase}",
            status,
        )

    if 502 <= status <= 503:
        logger.warning(f"LinkedIn unavailable ({status})")
        raise ServiceUnavailableError(f"({status}): {response.reason_phrase}", status)
