# 🧰 waifu_hub/infrastructure/sources/base.py
"""
🧰 Спільна механіка адаптерів джерел зображень.

🔹 `get_json()`: GET до API джерела + декодування JSON.
🔹 `require()`: дістає поле/елемент, перетворюючи відсутність на `ImageSourceMissingDataError`.
🔹 `require_list()` / `add_categories()`: масиви категорій з перевіркою форми.
🔹 `fetch_image()`: типова реалізація `ImageSource.fetch_image` з урахуванням історії.

Жодних ретраїв: один невдалий запит дає один виняток у викликача.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import json                                                         # 📄 Тип помилки декодування
import logging                                                      # 🧾 Логування запитів
from typing import Any, List, Mapping, Optional, Set, Union          # 📐 Типізація

# 🌐 Зовнішні бібліотеки
import httpx                                                        # 🌐 HTTP-транспорт

# 🧩 Внутрішні модулі проєкту
from waifu_hub.domain.images.image_data import ImageData
from waifu_hub.domain.images.interfaces import ImageSource
from waifu_hub.errors.custom_errors import (
    ErrorCode,
    ImageSourceDecodeError,
    ImageSourceMissingDataError,
)
from waifu_hub.shared import metrics
from waifu_hub.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.sources")


def source_name(source: ImageSource) -> str:
    return type(source).__name__


# ================================
# 🌐 ЗАПИТИ ДО API
# ================================
async def get_json(
    source: ImageSource,
    path: str,
    *,
    params: Optional[Mapping[str, str]] = None,
    headers: Optional[Mapping[str, str]] = None,
) -> Any:
    """
    🌐 Виконує `GET https://{base_url}{path}` і повертає розібраний JSON.

    Raises:
        httpx.HTTPError: транспортний збій або не-2xx статус (без обгортання).
        ImageSourceDecodeError: тіло не є валідним JSON.
    """
    name = source_name(source)
    url = f"https://{source.base_url}{path}"
    metrics.inc_request(name, path.split("?", 1)[0])
    logger.debug("📡 %s GET %s params=%s", name, url, dict(params or {}))
    try:
        response = await source.http.get(url, params=params, headers=headers)
        response.raise_for_status()
    except httpx.HTTPError as exc:
        metrics.inc_error(name, "http")
        logger.warning("⚠️ %s: HTTP-помилка для %s: %s", name, url, exc)
        raise

    try:
        return response.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        metrics.inc_error(name, ErrorCode.DECODE)
        raise ImageSourceDecodeError(
            "Response body is not valid JSON",
            source=name,
            url=str(response.url),
            details=str(exc),
        ) from exc


def require(data: Any, key: Union[str, int], *, source: ImageSource, url: Optional[str] = None) -> Any:
    """
    🔎 `data[key]` для словника чи списку.

    Raises:
        ImageSourceMissingDataError: ключа немає / індекс поза межами.
        ImageSourceDecodeError: `data` не того типу, що очікується.
    """
    name = source_name(source)
    try:
        return data[key]
    except (KeyError, IndexError) as exc:
        metrics.inc_error(name, ErrorCode.MISSING_DATA)
        raise ImageSourceMissingDataError(
            f"Missing {key!r} in response",
            source=name,
            url=url,
        ) from exc
    except TypeError as exc:
        metrics.inc_error(name, ErrorCode.DECODE)
        raise ImageSourceDecodeError(
            f"Unexpected response shape: cannot read {key!r} from {type(data).__name__}",
            source=name,
            url=url,
        ) from exc


def require_list(data: Any, key: str, *, source: ImageSource, url: Optional[str] = None) -> List[Any]:
    """🔎 Як `require()`, але значення мусить бути JSON-масивом."""
    value = require(data, key, source=source, url=url)
    if not isinstance(value, list):
        metrics.inc_error(source_name(source), ErrorCode.DECODE)
        raise ImageSourceDecodeError(
            f"Unexpected response shape: {key!r} is {type(value).__name__}, expected list",
            source=source_name(source),
            url=url,
        )
    return value


def add_categories(target: Set[str], items: List[Any], *, source: ImageSource, url: Optional[str] = None) -> None:
    """
    ➕ Додає елементи в набір категорій як є.

    Елементи, додані до збою, лишаються в наборі.
    """
    for item in items:
        try:
            target.add(item)
        except TypeError as exc:                                    # 🚫 Нехешований елемент (dict / list)
            metrics.inc_error(source_name(source), ErrorCode.DECODE)
            raise ImageSourceDecodeError(
                f"Unexpected category element of type {type(item).__name__}",
                source=source_name(source),
                url=url,
            ) from exc


# ================================
# 📥 ЗАВАНТАЖЕННЯ ЗОБРАЖЕННЯ
# ================================
async def fetch_image(source: ImageSource, category: str, *, is_sfw: bool) -> ImageData:
    """
    📥 Резолвить URL і віддає зображення.

    Якщо URL уже є в історії: повертається збережений запис як є
    (навіть з іншими `category`/`is_sfw`) без жодного запиту.
    Новий запис в історію НЕ додається.
    """
    name = source_name(source)
    url = await source.get_image_url(category, is_sfw=is_sfw)

    cached = source.client.history.get(url)
    if cached is not None:
        metrics.inc_history_hit(name)
        logger.debug("♻️ %s: %s уже в історії", name, url)
        return cached

    logger.debug("📥 %s: завантажую %s", name, url)
    try:
        response = await source.http.get(url)
        response.raise_for_status()
    except httpx.HTTPError as exc:
        metrics.inc_error(name, "http")
        logger.warning("⚠️ %s: не вдалося завантажити %s: %s", name, url, exc)
        raise

    image = ImageData(url=url, category=category, is_sfw=is_sfw, data=response.content)
    logger.info("✅ %s: %s/%s → %s (%d B)", name, "sfw" if is_sfw else "nsfw", category, url, len(image.data))
    return image
