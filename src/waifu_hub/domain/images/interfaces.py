# 🧩 waifu_hub/domain/images/interfaces.py
"""
🧩 Контракт джерела зображень.

🔹 `sfw` / `nsfw`: порожні до `populate_categories()`, далі лише поповнюються.
🔹 `get_image_url()` категорію не перевіряє: невідома категорія дає той збій,
   який спричинить відповідь конкретного API.
🔹 `fetch_image()` спершу дивиться в історію клієнта; в історію сам нічого не пише.
"""

from __future__ import annotations

# 🔠 Системні імпорти
from typing import TYPE_CHECKING, Protocol, Set, runtime_checkable

# 🌐 Зовнішні бібліотеки
import httpx                                                        # 🌐 Тип транспорту

# 🧩 Внутрішні модулі проєкту
from waifu_hub.domain.images.image_data import ImageData

if TYPE_CHECKING:                                                   # 🧪 Лише для типізації (уникаємо циклів)
    from waifu_hub.infrastructure.images.image_client import ImageClient


@runtime_checkable
class ImageSource(Protocol):
    """🖼️ Джерело випадкових зображень за категоріями."""

    sfw: Set[str]                                                   # ✅ SFW-категорії джерела
    nsfw: Set[str]                                                  # 🔞 NSFW-категорії джерела
    base_url: str                                                   # 🌐 Хост API
    client: "ImageClient"                                           # 🔗 Спільний контекст (не належить джерелу)

    @property
    def http(self) -> httpx.AsyncClient: ...

    async def populate_categories(self) -> None:
        """Отримує всі категорії, які джерело здатне віддати."""
        ...

    async def get_image_url(self, category: str, *, is_sfw: bool) -> str:
        """URL одного випадкового зображення категорії."""
        ...

    async def fetch_image(self, category: str, *, is_sfw: bool) -> ImageData:
        """Завантажує (або бере з історії) зображення категорії."""
        ...
