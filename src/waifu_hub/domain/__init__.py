"""🏛️ Доменний шар waifu_hub."""
