# 🚨 waifu_hub/errors/__init__.py
"""🚨 Публічні винятки waifu_hub."""

from .custom_errors import (
    AppError,
    ErrorCode,
    ImageSourceDecodeError,
    ImageSourceError,
    ImageSourceMissingDataError,
)

__all__ = [
    "AppError",
    "ErrorCode",
    "ImageSourceDecodeError",
    "ImageSourceError",
    "ImageSourceMissingDataError",
]
