"""🏗️ Інфраструктурний шар: HTTP-клієнт, сервіс та адаптери API."""
