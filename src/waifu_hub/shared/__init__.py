"""🧩 Спільні складові: логування та метрики."""
