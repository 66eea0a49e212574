# 🖼️ waifu_hub/domain/images/image_data.py
"""
🖼️ DTO завантаженого зображення.

Створюється один раз на успішне завантаження й більше не змінюється.
Після потрапляння в історію `ImageClient` належить саме їй.
"""

from __future__ import annotations

# 🔠 Системні імпорти
from dataclasses import dataclass                                   # 🧱 Іммутабельний DTO


@dataclass(frozen=True, slots=True)
class ImageData:
    """📚 Байти зображення разом з категорією, з якої його отримано."""

    url: str                                                        # 🌐 Джерельний URL (ключ історії)
    category: str                                                   # 🏷️ Запитана категорія
    is_sfw: bool                                                    # 🔞 Режим запиту
    data: bytes                                                     # 💾 Сирі байти відповіді

    def __repr__(self) -> str:
        return f"<ImageData url = {self.url}>"                     # 🙈 Байти в лог не потрапляють

    __str__ = __repr__
