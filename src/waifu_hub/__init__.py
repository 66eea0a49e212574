# 🖼️ waifu_hub/__init__.py
"""
🖼️ waifu_hub: асинхронний агрегатор API випадкових аніме-зображень.

    async with ImageClient.from_config() as client:
        service = ImageService(client)
        await service.populate_all()
        source = service.sources_for("waifu", is_sfw=True)[0]
        image = await service.fetch(source, "waifu", is_sfw=True)
"""

__version__ = "1.0.0"
