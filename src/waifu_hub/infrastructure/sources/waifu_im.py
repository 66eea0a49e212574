# 🌸 waifu_hub/infrastructure/sources/waifu_im.py
"""
🌸 Адаптер API waifu.im (версія v4).

🔹 `GET /tags?full=true`: теги: `versatile` йдуть в обидва набори, `nsfw`: лише в NSFW.
🔹 `GET /search?included_tags=..&is_nsfw=..`: перше зображення з `images`.
🔹 Кожен запит несе заголовок `Accept-Version: v4`.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging                                                      # 🧾 Логи адаптера
from typing import TYPE_CHECKING, Dict, Set                         # 📐 Типізація

# 🌐 Зовнішні бібліотеки
import httpx                                                        # 🌐 Тип транспорту

# 🧩 Внутрішні модулі проєкту
from waifu_hub.domain.images.image_data import ImageData
from waifu_hub.infrastructure.sources import base
from waifu_hub.shared.utils.logger import LOG_NAME

if TYPE_CHECKING:
    from waifu_hub.infrastructure.images.image_client import ImageClient

logger = logging.getLogger(f"{LOG_NAME}.sources.waifu_im")

API_HEADERS: Dict[str, str] = {"Accept-Version": "v4"}             # 🏷️ Обов'язкова версія API


class WaifuIm:
    """🌸 Джерело https://api.waifu.im."""

    base_url: str = "api.waifu.im"

    def __init__(self, client: "ImageClient") -> None:
        self.client = client
        self.sfw: Set[str] = set()
        self.nsfw: Set[str] = set()

    @property
    def http(self) -> httpx.AsyncClient:
        return self.client.http

    async def populate_categories(self) -> None:
        data = await base.get_json(self, "/tags", params={"full": "true"}, headers=API_HEADERS)
        url = f"https://{self.base_url}/tags?full=true"

        for tag in base.require_list(data, "versatile", source=self, url=url):
            name = base.require(tag, "name", source=self, url=url)
            base.add_categories(self.sfw, [name], source=self, url=url)     # ✅ Versatile-теги придатні для обох режимів
            base.add_categories(self.nsfw, [name], source=self, url=url)

        for tag in base.require_list(data, "nsfw", source=self, url=url):
            name = base.require(tag, "name", source=self, url=url)
            base.add_categories(self.nsfw, [name], source=self, url=url)

        logger.info("📚 WaifuIm: sfw=%d nsfw=%d", len(self.sfw), len(self.nsfw))

    async def get_image_url(self, category: str, *, is_sfw: bool) -> str:
        # API питає "чи NSFW", тому прапорець інвертовано
        params = {"included_tags": category, "is_nsfw": "false" if is_sfw else "true"}
        data = await base.get_json(self, "/search", params=params, headers=API_HEADERS)
        url = f"https://{self.base_url}/search"

        images = base.require(data, "images", source=self, url=url)
        first = base.require(images, 0, source=self, url=url)
        return base.require(first, "url", source=self, url=url)

    async def fetch_image(self, category: str, *, is_sfw: bool) -> ImageData:
        return await base.fetch_image(self, category, is_sfw=is_sfw)

    def __repr__(self) -> str:
        return f"<WaifuIm sfw={len(self.sfw)} nsfw={len(self.nsfw)}>"
