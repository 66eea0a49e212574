# 📊 waifu_hub/shared/metrics/__init__.py
"""
📊 Prometheus-лічильники для джерел зображень.

🔹 `REQUESTS_TOTAL`: кожен HTTP-запит джерела (за ендпоінтом).
🔹 `REQUEST_ERRORS_TOTAL`: збої за причиною (`http`, `decode`, `missing_data`).
🔹 `HISTORY_HITS_TOTAL`: повторні URL, віддані з історії без завантаження.
🔹 Збій метрик ніколи не ламає основний потік.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging                                                  # 🧾 Діагностика збоїв метрик

# 🌐 Зовнішні бібліотеки
from prometheus_client import Counter                           # 📈 Лічильники Prometheus

# 🧩 Внутрішні модулі проєкту
from waifu_hub.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.metrics")


# ================================
# 📈 ЛІЧИЛЬНИКИ
# ================================
REQUESTS_TOTAL = Counter(
    "waifu_requests_total",
    "HTTP-запити до API джерел зображень",
    ["source", "endpoint"],
)
REQUEST_ERRORS_TOTAL = Counter(
    "waifu_request_errors_total",
    "Збої запитів до API джерел за причинами",
    ["source", "reason"],
)
HISTORY_HITS_TOTAL = Counter(
    "waifu_history_hits_total",
    "Зображення, повернуті з історії без повторного завантаження",
    ["source"],
)


def _safe_inc(counter: Counter, **labels: str) -> None:
    try:
        counter.labels(**labels).inc()
    except Exception:                                           # noqa: BLE001
        logger.debug("⚠️ Не вдалося оновити метрику %s", counter, exc_info=True)


def inc_request(source: str, endpoint: str) -> None:
    """➕ Фіксує запит джерела до ендпоінта."""
    _safe_inc(REQUESTS_TOTAL, source=source, endpoint=endpoint)


def inc_error(source: str, reason: str) -> None:
    """➕ Фіксує збій запиту."""
    _safe_inc(REQUEST_ERRORS_TOTAL, source=source, reason=reason)


def inc_history_hit(source: str) -> None:
    _safe_inc(HISTORY_HITS_TOTAL, source=source)


__all__ = [
    "REQUESTS_TOTAL",
    "REQUEST_ERRORS_TOTAL",
    "HISTORY_HITS_TOTAL",
    "inc_request",
    "inc_error",
    "inc_history_hit",
]
