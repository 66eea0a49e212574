# 🌐 waifu_hub/infrastructure/images/image_client.py
"""
🌐 ImageClient: спільний контекст для всіх джерел зображень.

🎯 Призначення:
    • тримає один `httpx.AsyncClient`, яким користуються всі джерела;
    • зберігає історію завантажень `URL → ImageData`.

⚙️ Нотатки:
    • історія не має витіснення й росте без меж, поки живе клієнт;
    • джерела лише читають історію, записує її тільки `remember()`;
    • клієнт не знає, які джерела на нього посилаються.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
import httpx                                                        # 🌐 HTTP-транспорт

# 🔠 Системні імпорти
import logging                                                      # 🧾 Логи клієнта
from types import TracebackType                                     # 🧰 Типи для async with
from typing import Dict, Mapping, Optional, Type                    # 📐 Типізація

# 🧩 Внутрішні модулі проєкту
from waifu_hub.config.config_service import ConfigService           # ⚙️ Конфіги застосунку
from waifu_hub.domain.images.image_data import ImageData            # 🖼️ DTO зображення
from waifu_hub.shared.utils.logger import LOG_NAME                  # 🏷️ Базове ім'я логера

logger = logging.getLogger(f"{LOG_NAME}.client")

DEFAULT_TIMEOUT_S: float = 15.0                                     # ⏳ Таймаут за замовчуванням
DEFAULT_USER_AGENT: str = "waifu_hub/1.0"                           # 🪪 User-Agent за замовчуванням


class ImageClient:
    """
    🧠 Власник HTTP-транспорту та історії зображень.

    Якщо `http` передано ззовні: клієнт ним користується, але не закриває.
    """

    def __init__(
        self,
        http: Optional[httpx.AsyncClient] = None,
        *,
        timeout_s: float = DEFAULT_TIMEOUT_S,
        headers: Optional[Mapping[str, str]] = None,
    ) -> None:
        self._owns_http = http is None                              # 🔑 Закриваємо лише власний транспорт
        self.http: httpx.AsyncClient = http if http is not None else httpx.AsyncClient(
            timeout=httpx.Timeout(float(timeout_s)),
            headers={"User-Agent": DEFAULT_USER_AGENT, **dict(headers or {})},
            follow_redirects=True,
        )
        self.history: Dict[str, ImageData] = {}                     # 🗂️ URL → ImageData
        logger.debug("⚙️ ImageClient init owns_http=%s timeout=%.1fs", self._owns_http, float(timeout_s))

    @classmethod
    def from_config(cls, config: Optional[ConfigService] = None) -> "ImageClient":
        """⚙️ Будує клієнт з розділу `http` конфігурації."""
        config = config or ConfigService()
        timeout_s = float(config.get("http.timeout_sec", DEFAULT_TIMEOUT_S) or DEFAULT_TIMEOUT_S)
        user_agent = str(config.get("http.user_agent", DEFAULT_USER_AGENT) or DEFAULT_USER_AGENT)
        return cls(timeout_s=timeout_s, headers={"User-Agent": user_agent})

    # ================================
    # 🗂️ ІСТОРІЯ
    # ================================
    def remember(self, image: ImageData) -> None:
        """📝 Кладе зображення в історію під його URL (існуючий запис перезаписується)."""
        self.history[image.url] = image
        logger.debug("🗂️ History +1 (%d): %s", len(self.history), image.url)

    # ================================
    # 🔌 ЖИТТЄВИЙ ЦИКЛ
    # ================================
    async def close(self) -> None:
        """🔌 Закриває власний HTTP-клієнт; чужий залишає відкритим."""
        if self._owns_http and not self.http.is_closed:
            await self.http.aclose()
            logger.info("🔌 HTTP-клієнт ImageClient закрито.")

    async def __aenter__(self) -> "ImageClient":
        return self

    async def __aexit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        await self.close()
