# 🧰 waifu_hub/shared/utils/__init__.py
"""
🧰 Спільні утиліти: наразі лише єдина схема логування.
"""

from __future__ import annotations

# 🔠 Логування
from .logger import LOG_NAME, get_logger, init_logging, init_logging_from_config

__all__ = ["LOG_NAME", "get_logger", "init_logging", "init_logging_from_config"]
