# 🖼️ waifu_hub/domain/images/__init__.py
"""🖼️ Доменні типи зображень: DTO та контракт джерела."""

from __future__ import annotations

from .image_data import ImageData
from .interfaces import ImageSource

__all__ = ["ImageData", "ImageSource"]
