# config_manager.py - JSON config manager

import copy
import json
import logging
import os

from glossary_browser.text.scorers import FIELD_WEIGHTS

logger = logging.getLogger(__name__)

DEFAULTS = {
    "data_path": "data/glossary.json",
    "max_results": 20,
    "log_level": "WARNING",
    "weights": dict(FIELD_WEIGHTS),  # token weight per entry field
}


class Config:
    def __init__(self, path="glossary_config.json"):
        self.path = path
        self.data = copy.deepcopy(DEFAULTS)
        self._load()

    def _load(self):
        if not os.path.exists(self.path):
            return
        try:
            with open(self.path, "r", encoding="utf8") as f:
                user = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("ignoring unreadable config %s: %s", self.path, e)
            return
        if not isinstance(user, dict):
            logger.warning("ignoring config %s: expected a JSON object", self.path)
            return
        weights = user.pop("weights", None) or {}
        if not isinstance(weights, dict):
            logger.warning("ignoring 'weights' in %s: expected a JSON object", self.path)
            weights = {}
        self.data.update(user)
        self.data["weights"].update(weights)

    def save(self):
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key, default=None):
        return self.data.get(key, default)

    def set(self, key, val):
        if key not in self.data or key == "weights":
            raise KeyError(f"no such option: {key}")
        self.data[key] = type(DEFAULTS[key])(val)
        self.save()
