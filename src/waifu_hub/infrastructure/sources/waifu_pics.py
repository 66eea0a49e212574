# 🎀 waifu_hub/infrastructure/sources/waifu_pics.py
"""
🎀 Адаптер API waifu.pics.

🔹 `GET /endpoints` → `{"sfw": [...], "nsfw": [...]}`: перелік категорій.
🔹 `GET /{sfw|nsfw}/{category}` → `{"url": "..."}`: випадкове зображення.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging                                                      # 🧾 Логи адаптера
from typing import TYPE_CHECKING, Set                               # 📐 Типізація

# 🌐 Зовнішні бібліотеки
import httpx                                                        # 🌐 Тип транспорту

# 🧩 Внутрішні модулі проєкту
from waifu_hub.domain.images.image_data import ImageData
from waifu_hub.infrastructure.sources import base
from waifu_hub.shared.utils.logger import LOG_NAME

if TYPE_CHECKING:
    from waifu_hub.infrastructure.images.image_client import ImageClient

logger = logging.getLogger(f"{LOG_NAME}.sources.waifu_pics")


def sfw_state_expression(is_sfw: bool) -> str:
    """Сегмент шляху для режиму: `sfw` або `nsfw`."""
    return "sfw" if is_sfw else "nsfw"


class WaifuPics:
    """🎀 Джерело https://api.waifu.pics."""

    base_url: str = "api.waifu.pics"

    def __init__(self, client: "ImageClient") -> None:
        self.client = client
        self.sfw: Set[str] = set()
        self.nsfw: Set[str] = set()

    @property
    def http(self) -> httpx.AsyncClient:
        return self.client.http

    async def populate_categories(self) -> None:
        data = await base.get_json(self, "/endpoints")
        url = f"https://{self.base_url}/endpoints"
        base.add_categories(self.sfw, base.require_list(data, "sfw", source=self, url=url), source=self, url=url)
        base.add_categories(self.nsfw, base.require_list(data, "nsfw", source=self, url=url), source=self, url=url)
        logger.info("📚 WaifuPics: sfw=%d nsfw=%d", len(self.sfw), len(self.nsfw))

    async def get_image_url(self, category: str, *, is_sfw: bool) -> str:
        path = f"/{sfw_state_expression(is_sfw)}/{category}"
        data = await base.get_json(self, path)
        return base.require(data, "url", source=self, url=f"https://{self.base_url}{path}")

    async def fetch_image(self, category: str, *, is_sfw: bool) -> ImageData:
        return await base.fetch_image(self, category, is_sfw=is_sfw)

    def __repr__(self) -> str:
        return f"<WaifuPics sfw={len(self.sfw)} nsfw={len(self.nsfw)}>"
