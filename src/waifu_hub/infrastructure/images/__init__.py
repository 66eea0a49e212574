# 🌐 waifu_hub/infrastructure/images/__init__.py
"""
🌐 Клієнтський контекст та сервіс зображень.

🔹 `ImageClient`: HTTP-транспорт + історія завантажень.
🔹 `ImageService`: заповнення категорій і запис в історію.
"""

from __future__ import annotations

from .image_client import ImageClient
from .image_service import ImageService

__all__ = ["ImageClient", "ImageService"]
