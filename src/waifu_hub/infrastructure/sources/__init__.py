# 🖼️ waifu_hub/infrastructure/sources/__init__.py
"""
🖼️ Адаптери API зображень.

🔹 `WaifuPics`: https://api.waifu.pics
🔹 `WaifuIm`: https://api.waifu.im
🔹 `construct_sources`: усі джерела одним списком.
"""

from __future__ import annotations

from .registry import construct_sources
from .waifu_im import WaifuIm
from .waifu_pics import WaifuPics

__all__ = ["WaifuIm", "WaifuPics", "construct_sources"]
