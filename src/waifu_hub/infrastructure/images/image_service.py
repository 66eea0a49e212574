# 🧭 waifu_hub/infrastructure/images/image_service.py
"""
🧭 ImageService: шар викликача над джерелами та клієнтом.

🔹 Заповнює категорії всіх джерел паралельно.
🔹 Підказує, які джерела знають потрібну категорію.
🔹 Завантажує зображення та записує його в історію клієнта.

Ретраїв і переходу на інше джерело тут немає: викликач сам обирає,
чи пробувати наступне джерело зі `sources_for()`.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import asyncio                                                      # 🔁 Паралельне заповнення категорій
import logging                                                      # 🧾 Логи сервісу
from typing import List, Optional, Sequence                         # 📐 Типізація

# 🧩 Внутрішні модулі проєкту
from waifu_hub.domain.images.image_data import ImageData
from waifu_hub.domain.images.interfaces import ImageSource
from waifu_hub.infrastructure.images.image_client import ImageClient
from waifu_hub.infrastructure.sources.registry import construct_sources
from waifu_hub.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.service")


class ImageService:
    """🧭 Поєднує реєстр джерел з історією `ImageClient`."""

    def __init__(self, client: ImageClient, sources: Optional[Sequence[ImageSource]] = None) -> None:
        self.client = client
        self.sources: List[ImageSource] = list(sources) if sources is not None else construct_sources(client)

    async def populate_all(self) -> None:
        """
        🔄 Викликає `populate_categories()` у всіх джерел одночасно.

        Чекає завершення всіх джерел, далі перший збій (у порядку реєстру) летить
        до викликача; категорії, додані до збою, лишаються.
        """
        results = await asyncio.gather(
            *(source.populate_categories() for source in self.sources),
            return_exceptions=True,
        )                                                           # 🧺 Збираємо результати й помилки
        errors = [result for result in results if isinstance(result, BaseException)]
        for error in errors[1:]:
            logger.warning("⚠️ Ще одне джерело не заповнило категорії: %r", error)
        if errors:
            raise errors[0]
        logger.info(
            "📚 Категорії заповнено: %s",
            ", ".join(f"{type(s).__name__}(sfw={len(s.sfw)}, nsfw={len(s.nsfw)})" for s in self.sources),
        )

    def sources_for(self, category: str, *, is_sfw: bool) -> List[ImageSource]:
        """🔎 Джерела, чий набір для режиму містить категорію (у порядку реєстру)."""
        return [s for s in self.sources if category in (s.sfw if is_sfw else s.nsfw)]

    async def fetch(self, source: ImageSource, category: str, *, is_sfw: bool) -> ImageData:
        """📥 `source.fetch_image()` + запис результату в історію клієнта."""
        image = await source.fetch_image(category, is_sfw=is_sfw)
        self.client.remember(image)
        return image
