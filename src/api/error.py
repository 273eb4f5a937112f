from typing import Dict, Optional

from fastapi import status
from libs.result import Error


class ClientError(Exception):
    def __init__(
        self,
        base_error: Error,
        status_code: int = status.HTTP_400_BAD_REQUEST,
        headers: Optional[Dict[str, str]] = None,
    ):
        self.base_error = base_error
        self.status_code = status_code
        self.headers = headers
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


# Error codes whose status is not implied by their suffix
STATUS_BY_CODE = {
    "UNAUTHORIZED": status.HTTP_401_UNAUTHORIZED,
    "INVALID_CREDENTIALS": status.HTTP_401_UNAUTHORIZED,
    "FORBIDDEN": status.HTTP_403_FORBIDDEN,
    "ORGANIZATION_INACTIVE": status.HTTP_403_FORBIDDEN,
    "USER_INACTIVE": status.HTTP_403_FORBIDDEN,
    "ACCOUNT_BLOCKED": status.HTTP_403_FORBIDDEN,
    "CANNOT_CHANGE_OWN_ROLE": status.HTTP_403_FORBIDDEN,
    "CANNOT_DEACTIVATE_SELF": status.HTTP_403_FORBIDDEN,
    "EMAIL_ALREADY_EXISTS": status.HTTP_409_CONFLICT,
    "SLUG_ALREADY_EXISTS": status.HTTP_409_CONFLICT,
    "CASE_NUMBER_CONFLICT": status.HTTP_409_CONFLICT,
    "FILE_TOO_LARGE": status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
    "UNSUPPORTED_MEDIA_TYPE": status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
    "RATE_LIMITED": status.HTTP_429_TOO_MANY_REQUESTS,
    "DAILY_LIMIT_REACHED": status.HTTP_429_TOO_MANY_REQUESTS,
    "STORAGE_UPLOAD_FAILED": status.HTTP_502_BAD_GATEWAY,
    "DOCUMENT_DOWNLOAD_FAILED": status.HTTP_502_BAD_GATEWAY,
    "REVIEW_FAILED": status.HTTP_502_BAD_GATEWAY,
    "NO_FIELDS": status.HTTP_400_BAD_REQUEST,
    "MISSING_FIELDS": status.HTTP_400_BAD_REQUEST,
    "MISSING_PROMPT": status.HTTP_400_BAD_REQUEST,
    "MISSING_FILE": status.HTTP_400_BAD_REQUEST,
    "DOCUMENT_HAS_NO_FILE": status.HTTP_400_BAD_REQUEST,
    "REPORT_TYPE_REQUIRED": status.HTTP_400_BAD_REQUEST,
    "WEAK_PASSWORD": status.HTTP_400_BAD_REQUEST,
}


def status_for(error: Error) -> Optional[int]:
    """HTTP status of a client-side error code, None for server-side ones"""
    if error.code in STATUS_BY_CODE:
        return STATUS_BY_CODE[error.code]
    if error.code.endswith("_NOT_FOUND"):
        return status.HTTP_404_NOT_FOUND
    if error.code.startswith("INVALID_"):
        return status.HTTP_400_BAD_REQUEST
    return None


def raise_for_error(error: Error):
    """
    Raise the API exception matching a use case error.

    Rate-limit errors carry their Retry-After seconds in ``error.reason``.
    Anything without a client status (e.g. *_NOT_CONFIGURED) is a ServerError.
    """
    status_code = status_for(error)
    if status_code is None:
        raise ServerError(error)

    headers = None
    if status_code == status.HTTP_429_TOO_MANY_REQUESTS and error.reason:
        headers = {"Retry-After": error.reason}
    raise ClientError(Error(error.code, error.message), status_code=status_code, headers=headers)
