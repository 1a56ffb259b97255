from __future__ import annotations
import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class Settings:
    def __init__(self, path: Path):
        self.path = Path(path)
        self._data = {
            "tint_color": "#000000",      # QColor'un kabul ettiği her değer
            "animation_duration": 300,    # ms
            "disabled_alpha": 0.5,        # [0, 1]
        }

    def load(self):
        if self.path.exists():
            try:
                self._data.update(json.loads(self.path.read_text("utf-8")))
            except (OSError, ValueError) as e:
                logger.warning("Could not read settings from %s: %s", self.path, e)

    def save(self):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(self._data, ensure_ascii=False, indent=2), encoding="utf-8")

    def get(self, key, default=None):
        return self._data.get(key, default)

    def set(self, key, value):
        self._data[key] = value
