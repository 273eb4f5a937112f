import pytest

from libs.result import Error
from src.api.error import ClientError, ServerError, raise_for_error, status_for


@pytest.mark.parametrize(
    "code,expected",
    [
        ("UNAUTHORIZED", 401),
        ("FORBIDDEN", 403),
        ("CASE_NOT_FOUND", 404),
        ("INVALID_STATUS", 400),
        ("EMAIL_ALREADY_EXISTS", 409),
        ("FILE_TOO_LARGE", 413),
        ("UNSUPPORTED_MEDIA_TYPE", 415),
        ("RATE_LIMITED", 429),
        ("STORAGE_UPLOAD_FAILED", 502),
        ("EMAIL_NOT_CONFIGURED", None),
    ],
)
def test_status_for(code, expected):
    assert status_for(Error(code, "msg")) == expected


def test_rate_limit_error_carries_retry_after():
    with pytest.raises(ClientError) as exc_info:
        raise_for_error(Error("RATE_LIMITED", "Demasiadas solicitudes", reason="7"))

    assert exc_info.value.status_code == 429
    assert exc_info.value.headers == {"Retry-After": "7"}


def test_unmapped_error_is_server_error():
    with pytest.raises(ServerError):
        raise_for_error(Error("DEMO_ORG_NOT_CONFIGURED", "missing"))
