"""
Validation of opening payloads.

Checks run in a fixed order and the first failure is raised, so a given
payload always produces the same message.
"""
from typing import Optional
from urllib.parse import urlparse

from app.core.exceptions import OpeningValidationError, err_param_is_required
from app.schemas.opening import OpeningRequest

REQUIRED_TEXT_FIELDS = ("role", "company", "location")

# Salary is stored in a 64-bit INTEGER column
MAX_SALARY = 2 ** 63 - 1


def is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def is_http_url(value: str) -> bool:
    """
    Check that a string is an absolute http(s) URL with a host.

    Args:
        value: Candidate URL

    Returns:
        True if the scheme is http or https and a network location is present
    """
    try:
        parsed = urlparse(value.strip())
    except ValueError:
        return False
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def validate_opening_request(request: Optional[OpeningRequest]) -> None:
    """
    Validate a create or update payload.

    Args:
        request: Decoded request body (None when no body was sent)

    Raises:
        OpeningValidationError: naming the first field that fails
    """
    if request is None or request.is_empty():
        raise OpeningValidationError("request body is empty or malformed")

    for name in REQUIRED_TEXT_FIELDS:
        if is_blank(getattr(request, name)):
            raise err_param_is_required(name, "string")

    # remote=False is a valid answer, only absence is rejected
    if request.remote is None:
        raise err_param_is_required("remote", "bool")

    if request.link is not None and not is_http_url(request.link):
        raise OpeningValidationError(
            "param: link (type: string) must be a valid http(s) URL", field="link"
        )

    if request.salary is not None and request.salary < 0:
        raise OpeningValidationError(
            "param: salary (type: int) must be a non-negative number", field="salary"
        )

    if request.salary is not None and request.salary > MAX_SALARY:
        raise OpeningValidationError(
            f"param: salary (type: int) must not exceed {MAX_SALARY}", field="salary"
        )
