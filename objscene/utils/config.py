"""
Простой загрузчик/сохранитель настроек импорта в формате JSON.
Если файл не найден – создаётся файл с настройками по‑умолчанию.
"""

import copy
import json
from pathlib import Path
from objscene.utils.logger import logger

DEFAULT_CONFIG = {
    "random_seed": 0,
    "attribute_padding": "repeat",     # repeat | zero
    "workers": 1,
    "textures": {"enabled": True, "flip_rows": True},
}


class Config:
    """Настройки загрузчика сцен (JSON‑файл на диске)."""

    def __init__(self, path: str = "objscene.json"):
        self.path = Path(path)
        self._load()

    def _load(self):
        if self.path.is_file():
            try:
                with self.path.open("r", encoding="utf-8") as f:
                    self.data = json.load(f)
                logger.info(f"[Config] Loaded configuration from {self.path}.")
            except (OSError, ValueError) as exc:
                logger.error(f"[Config] Failed to read config: {exc}")
                self.data = copy.deepcopy(DEFAULT_CONFIG)
                self.save()
        else:
            logger.info("[Config] No config file – creating default.")
            self.data = copy.deepcopy(DEFAULT_CONFIG)
            self.save()

    def save(self):
        try:
            with self.path.open("w", encoding="utf-8") as f:
                json.dump(self.data, f, indent=4)
            logger.info("[Config] Configuration saved.")
        except OSError as exc:
            logger.error(f"[Config] Unable to save config: {exc}")

    def __getitem__(self, key):
        return self.data.get(key, DEFAULT_CONFIG.get(key))

    def __setitem__(self, key, value):
        self.data[key] = value
        self.save()

    def get(self, key, default=None):
        return self.data.get(key, default)

    def texture_option(self, name: str):
        """Опция из секции `textures` с откатом к значению по‑умолчанию."""
        section = self["textures"] or {}
        return section.get(name, DEFAULT_CONFIG["textures"][name])
