# 🚀 waifu_hub/bootstrap.py
"""
🚀 Точка збирання: конфіг → логування → клієнт → сервіс.
"""

from __future__ import annotations

from typing import Optional

from waifu_hub.config.config_service import ConfigService
from waifu_hub.infrastructure.images.image_client import ImageClient
from waifu_hub.infrastructure.images.image_service import ImageService
from waifu_hub.shared.utils.logger import init_logging_from_config


def build_service(config: Optional[ConfigService] = None) -> ImageService:
    """
    🏗️ Ініціалізує логування з розділу `logging` і повертає сервіс з усіма джерелами.

    Категорії ще не заповнені: викликач робить `await service.populate_all()`
    і врешті `await service.client.close()`.
    """
    config = config or ConfigService()
    init_logging_from_config(config.get("logging", {}))
    return ImageService(ImageClient.from_config(config))
