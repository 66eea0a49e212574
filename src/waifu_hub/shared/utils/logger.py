# 📜 waifu_hub/shared/utils/logger.py
"""
📜 Єдина схема логування для клієнтів джерел зображень.

🔹 Налаштовує логер `waifu_hub` з консольним і (опційно) файловим виводом.
🔹 Файл пишеться з ротацією за часом, за бажанням у JSON-форматі.
🔹 Приглушує балакучі HTTP-бібліотеки (`httpx`, `httpcore`).
"""
from __future__ import annotations

# 🔠 Системні імпорти
import json                                                     # 📦 Серіалізація JSON-записів
import logging                                                  # 🪵 Стандартні логери
import sys                                                      # 🧵 Потік stdout
import threading                                                # 🔒 Захист ініціалізації
from dataclasses import dataclass, field                        # 🧱 DTO-конфіг логування
from logging.handlers import TimedRotatingFileHandler           # 📁 Ротація файлів
from pathlib import Path                                        # 📂 Шляхи до лог-файлу
from typing import Any, Dict, Optional, Union                   # 🧰 Типізація

# ================================
# 🧾 КОНСТАНТИ МОДУЛЯ
# ================================
LOG_NAME: str = "waifu_hub"                                     # 🏷️ Базовий префікс логерів
PLAIN_FORMAT: str = "%(asctime)s [%(levelname)s] - (%(name)s).%(funcName)s(%(lineno)d) - %(message)s"
CONSOLE_FORMAT: str = "[%(levelname).1s] %(name)s: %(message)s"
DEFAULT_SUPPRESS: Dict[str, str] = {"httpx": "WARNING", "httpcore": "WARNING"}

_RESERVED_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "asctime"}
_lock = threading.Lock()


@dataclass
class LoggingConfig:
    """Налаштування логування з дефолтами."""
    level: str = "INFO"
    console: bool = True
    json: bool = False
    file: Optional[str] = None                                  # 📁 None → файловий вивід вимкнено
    when: str = "midnight"
    backup_count: int = 7
    suppress: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_SUPPRESS))


class JsonFormatter(logging.Formatter):
    """Пише запис як плаский JSON разом з `extra`-полями."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "time": self.formatTime(record, datefmt="%Y-%m-%d %H:%M:%S"),
            "level": record.levelname,
            "name": record.name,
            "func": record.funcName,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key.startswith("_") or key in _RESERVED_ATTRS or key in payload:
                continue
            try:
                json.dumps(value)                               # ✅ Серіалізується як є
                payload[key] = value
            except (TypeError, ValueError):
                payload[key] = str(value)                       # 🔄 Інакше: рядок
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def _to_level(value: Union[str, int, None], default: int = logging.INFO) -> int:
    """Рядок або число → числовий рівень логування."""
    if isinstance(value, int):
        return value
    if not value:
        return default
    return getattr(logging, str(value).upper(), default)


def _make_file_handler(cfg: LoggingConfig) -> logging.Handler:
    assert cfg.file is not None
    log_path = Path(cfg.file)
    log_path.parent.mkdir(parents=True, exist_ok=True)          # 🧱 Каталог для логів
    handler = TimedRotatingFileHandler(
        filename=str(log_path),
        when=cfg.when,
        backupCount=cfg.backup_count,
        encoding="utf-8",
    )
    handler.setFormatter(JsonFormatter() if cfg.json else logging.Formatter(PLAIN_FORMAT))
    return handler


# ================================
# 🚀 ПУБЛІЧНИЙ API
# ================================
def init_logging(
    *,
    level: Optional[str] = None,
    console: Optional[bool] = None,
    json_mode: Optional[bool] = None,
    file: Optional[str] = None,
    suppress: Optional[Dict[str, str]] = None,
) -> logging.Logger:
    """Ініціалізує кореневий логер `waifu_hub`; повторний виклик переналаштовує його."""
    with _lock:
        cfg = LoggingConfig(
            level=level or "INFO",
            console=True if console is None else bool(console),
            json=bool(json_mode),
            file=file,
            suppress=DEFAULT_SUPPRESS if suppress is None else suppress,
        )
        root_logger = logging.getLogger(LOG_NAME)
        root_logger.setLevel(_to_level(cfg.level))

        for handler in list(root_logger.handlers):              # 🧹 Прибираємо старі хендлери
            root_logger.removeHandler(handler)
            handler.close()

        if cfg.console:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
            root_logger.addHandler(console_handler)
        if cfg.file:
            root_logger.addHandler(_make_file_handler(cfg))

        for name, lib_level in cfg.suppress.items():            # 🙊 Сторонні бібліотеки
            logging.getLogger(name).setLevel(_to_level(lib_level, logging.WARNING))

        root_logger.debug(
            "✅ Logging initialized | level=%s console=%s json=%s file=%s",
            cfg.level.upper(),
            "ON" if cfg.console else "OFF",
            "ON" if cfg.json else "OFF",
            cfg.file or "-",
        )
        return root_logger


def init_logging_from_config(config: Optional[Dict[str, Any]]) -> logging.Logger:
    """
    Ініціалізує логування з розділу `logging` конфігурації.

    Args:
        config: Словник, напр. `ConfigService().get("logging", {})`.

    Returns:
        logging.Logger: Налаштований кореневий логер.
    """
    node = config or {}
    return init_logging(
        level=node.get("level"),
        console=node.get("console"),
        json_mode=node.get("json"),
        file=node.get("file"),
        suppress=node.get("suppress"),
    )


def get_logger(suffix: Optional[str] = None) -> logging.Logger:
    """Повертає дочірній логер `waifu_hub.<suffix>`."""
    return logging.getLogger(LOG_NAME if not suffix else f"{LOG_NAME}.{suffix}")
