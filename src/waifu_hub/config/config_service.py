# ⚙️ waifu_hub/config/config_service.py
"""
⚙️ config_service.py: Сервіс доступу до конфігурації waifu_hub.

🔹 Клас `ConfigService`:
- Читає пакетний `config.yaml` як базові значення.
- Перекриває їх змінними середовища (з урахуванням `.env`).
- Надає єдиний метод .get() з ключами через крапку.
- Працює як Singleton.
"""

# 🌐 Зовнішні бібліотеки
import yaml                                  # 📦 YAML-парсинг
from dotenv import load_dotenv              # 🔐 Завантаження змінних із .env

# 🔠 Системні імпорти
import os                                   # 📁 Доступ до змінних середовища
import logging                              # 🧾 Логування
from pathlib import Path                    # 📁 Шлях до config.yaml
from typing import Any, Dict, Optional      # 🧩 Типізація

logger = logging.getLogger("waifu_hub.config")

DEFAULT_CONFIG_PATH = Path(__file__).parent / "config.yaml"

# 🔁 Змінна середовища → ключ конфігурації
ENV_MAPPING: Dict[str, str] = {
    "WAIFU_HTTP_TIMEOUT": "http.timeout_sec",
    "WAIFU_USER_AGENT": "http.user_agent",
    "WAIFU_LOG_LEVEL": "logging.level",
    "WAIFU_LOG_FILE": "logging.file",
    "WAIFU_LOG_JSON": "logging.json",
}


# ============================
# ⚙️ СЕРВІС ДОСТУПУ ДО КОНФІГІВ
# ============================
class ConfigService:
    """
    ⚙️ Надає доступ до параметрів HTTP-клієнта та логування.
    Конфігурація зчитується лише один раз на процес.
    """

    _instance: Optional["ConfigService"] = None
    _config: Dict[str, Any] = {}

    def __new__(cls, config_path: Optional[Path] = None):
        if cls._instance is None:
            instance = super().__new__(cls)
            instance._config = {}
            instance._load_all_configs(Path(config_path) if config_path else DEFAULT_CONFIG_PATH)
            cls._instance = instance
            logger.debug("🔄 ConfigService створено і конфігурація завантажена")
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """♻️ Скидає синглтон (наступний виклик перечитає конфіги)."""
        cls._instance = None

    def _load_all_configs(self, yaml_path: Path) -> None:
        """
        📥 Завантажує конфігурацію.
        Пріоритет: config.yaml → змінні середовища (.env)
        """
        # --- 1. YAML-файл ---
        try:
            with open(yaml_path, "r", encoding="utf-8") as f:
                self._deep_update(self._config, yaml.safe_load(f) or {})
        except (FileNotFoundError, yaml.YAMLError) as e:
            logger.warning("⚠️ Не вдалося завантажити %s: %s", yaml_path, e)

        # --- 2. .env та середовище ---
        load_dotenv()
        env_vars = {
            key: self._convert_env_value(os.environ[env_name])
            for env_name, key in ENV_MAPPING.items()
            if env_name in os.environ
        }
        self._deep_update(self._config, self._unflatten_dict(env_vars))
        logger.debug("🔍 Обʼєднана конфігурація: %s", self._config)

    def get(self, key: str, default: Any = None) -> Any:
        """
        🔑 Отримує значення за ключем (наприклад: 'http.timeout_sec').

        Args:
            key (str): Ключ у форматі з крапкою.
            default (Any): Значення, якщо ключ не знайдено.

        Returns:
            Any: Значення параметра або default.
        """
        value: Any = self._config
        for k in key.split("."):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value

    # ===============================
    # 🔧 ДОПОМІЖНІ МЕТОДИ
    # ===============================
    @staticmethod
    def _convert_env_value(value: str) -> Any:
        """Рядок зі середовища → bool / int / float / str."""
        if value.lower() in ("true", "false"):
            return value.lower() == "true"
        for cast in (int, float):
            try:
                return cast(value)
            except ValueError:
                pass
        return value

    @staticmethod
    def _unflatten_dict(d: Dict[str, Any]) -> Dict[str, Any]:
        """'http.timeout_sec' → {'http': {'timeout_sec': ...}}"""
        result: Dict[str, Any] = {}
        for key, value in d.items():
            parts = key.split(".")
            d_ref = result
            for part in parts[:-1]:
                d_ref = d_ref.setdefault(part, {})
            d_ref[parts[-1]] = value
        return result

    def _deep_update(self, source: Dict, overrides: Dict) -> None:
        """🔁 Рекурсивно обʼєднує словники (вкладені словники зливаються)."""
        for key, value in overrides.items():
            if isinstance(value, dict) and isinstance(source.get(key), dict):
                self._deep_update(source[key], value)
            else:
                source[key] = value
