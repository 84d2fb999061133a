"""
Application-level exceptions.
"""
from typing import Optional


class OpeningValidationError(ValueError):
    """An opening payload failed a field check"""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


def err_param_is_required(name: str, typ: str) -> OpeningValidationError:
    return OpeningValidationError(f"param: {name} (type: {typ}) is required", field=name)
