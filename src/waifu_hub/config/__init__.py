# ⚙️ waifu_hub/config/__init__.py
"""
⚙️ Пакет Config: доступ до налаштувань HTTP-клієнта та логування.
"""

from .config_service import ConfigService

__all__ = ["ConfigService"]
