# config_manager.py - JSON config manager for the generator CLI

import json
import os

from markov_textgen.errors import ConfigError

DEFAULTS = {
    "window_length": 3,
    "seed": None,       # None -> unseeded, non-reproducible output
    "length": 200,
    "initial_text": "",
    "show_table": False,
}


class Config:
    """
    Settings from an optional JSON file layered over DEFAULTS.
    A missing file leaves the defaults in place; save() writes one.
    """
    def __init__(self, path=None):
        self.path = path
        self.data = dict(DEFAULTS)
        if path and os.path.exists(path):
            self._load()

    def _load(self):
        try:
            with open(self.path, "r", encoding="utf8") as f:
                loaded = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigError(f"bad config file {self.path}: {e}") from e
        if not isinstance(loaded, dict):
            raise ConfigError(f"config file {self.path} must hold a JSON object")

        for k, v in loaded.items():
            if k not in self.data:
                continue
            try:
                self.data[k] = self._coerce(k, v)
            except (TypeError, ValueError) as e:
                raise ConfigError(f"bad value for {k!r} in {self.path}: {v!r}") from e

    def save(self):
        if not self.path:
            return
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key, default=None):
        return self.data.get(key, default)

    def set(self, key, val):
        if key not in self.data:
            raise KeyError(f"no such option: {key}")
        self.data[key] = self._coerce(key, val)
        self.save()

    def as_dict(self):
        return dict(self.data)

    @staticmethod
    def _coerce(key, val):
        """Convert `val` to the type of the option's default."""
        if key == "seed":
            if val is None or (isinstance(val, str) and val.lower() in ("", "none")):
                return None
            return int(val)
        if val is None:
            raise TypeError(f"{key} may not be null")
        kind = type(DEFAULTS[key])
        if kind is bool and isinstance(val, str):
            return val.lower() in ("1", "true", "yes", "on")
        return kind(val)
