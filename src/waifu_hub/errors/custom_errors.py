# 🚨 waifu_hub/errors/custom_errors.py
"""
🚨 Ієрархія винятків джерел зображень.

🔹 `AppError`: базовий виняток пакета з `details`.
🔹 `ImageSourceError`: збій, що стався всередині адаптера джерела.
🔹 `ImageSourceDecodeError`: тіло відповіді не є JSON очікуваної форми.
🔹 `ImageSourceMissingDataError`: бракує поля або масив порожній.

Транспортні збої (`httpx.HTTPError`) сюди не загортаються й летять до викликача як є.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging														# 🧾 Логування створення винятків
from typing import Dict, Optional									# 📐 Типізація

logger = logging.getLogger("waifu_hub.errors")


# ================================
# ⚠️ КОДИ ПОМИЛОК
# ================================
class ErrorCode:
    """⚠️ Коди для `extra` у логах та міток метрик."""

    DECODE = "decode"												# 📄 Невалідний JSON / форма
    MISSING_DATA = "missing_data"									# 🕳️ Відсутнє поле / порожній масив
    UNKNOWN = "unknown_error"										# ❓ Резервний код


# ================================
# 🧠 БАЗОВІ ВИНЯТКИ
# ================================
class AppError(Exception):
    """🧠 Базовий виняток waifu_hub."""

    code: str = ErrorCode.UNKNOWN

    def __init__(self, message: str, *, details: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} ({self.details})"
        return self.message


class ImageSourceError(AppError):
    """🖼️ Помилка адаптера джерела зображень."""

    def __init__(
        self,
        message: str,
        *,
        source: str,
        url: Optional[str] = None,
        details: Optional[str] = None,
    ) -> None:
        super().__init__(message, details=details)
        self.source = source										# 🏷️ Назва джерела (WaifuPics / WaifuIm)
        self.url = url												# 🔗 Запит, відповідь якого не розібрано
        logger.debug("🧾 %s created", type(self).__name__, extra=self.to_log_extra())

    def to_log_extra(self) -> Dict[str, object]:
        """📦 Словник для `logger.extra`."""
        extra: Dict[str, object] = {"error_code": self.code, "source": self.source}
        if self.url:
            extra["url"] = self.url
        if self.details:
            extra["details"] = self.details
        return extra


class ImageSourceDecodeError(ImageSourceError, ValueError):
    """📄 Відповідь не декодується як JSON очікуваної форми."""

    code = ErrorCode.DECODE


class ImageSourceMissingDataError(ImageSourceError, LookupError):
    """🕳️ Відсутнє очікуване поле або масив порожній."""

    code = ErrorCode.MISSING_DATA


__all__ = [
    "ErrorCode",
    "AppError",
    "ImageSourceError",
    "ImageSourceDecodeError",
    "ImageSourceMissingDataError",
]
