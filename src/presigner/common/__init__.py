"""Common utilities for presigner."""

from presigner.common.errors import ErrorCode, InvalidArgument, PresignerError
from presigner.common.settings import Settings, get_settings

__all__ = [
    "ErrorCode",
    "InvalidArgument",
    "PresignerError",
    "Settings",
    "get_settings",
]
