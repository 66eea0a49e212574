# 📇 waifu_hub/infrastructure/sources/registry.py
"""
📇 Реєстр джерел зображень.

Новий бекенд = новий адаптер + рядок у `construct_sources()`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

from waifu_hub.domain.images.interfaces import ImageSource
from waifu_hub.infrastructure.sources.waifu_im import WaifuIm
from waifu_hub.infrastructure.sources.waifu_pics import WaifuPics

if TYPE_CHECKING:
    from waifu_hub.infrastructure.images.image_client import ImageClient


def construct_sources(client: "ImageClient") -> List[ImageSource]:
    """🏗️ Свіжі екземпляри всіх відомих джерел, прив'язані до одного клієнта."""
    return [WaifuPics(client), WaifuIm(client)]
