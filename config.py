import json
import os
from dataclasses import dataclass, asdict, fields
from typing import Optional

CONFIG_DIR = os.getenv("STAR_REGISTRY_HOME") or os.path.join(os.path.expanduser("~"), ".star_registry")
CONFIG_PATH = os.path.join(CONFIG_DIR, "config.json")


@dataclass
class RegistryConfig:
    verification_window_seconds: int = 300   # ownership message lifetime
    registry_tag: str = "starRegistry"
    genesis_data: str = "Genesis Block"
    log_level: str = "INFO"                  # used by run_demo only

    def save(self, path: Optional[str] = None):
        path = path or CONFIG_PATH
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(path, "w") as f:
            json.dump(asdict(self), f, indent=2)

    @staticmethod
    def load(path: Optional[str] = None):
        path = path or CONFIG_PATH
        if not os.path.exists(path):
            cfg = RegistryConfig()
            cfg.save(path)
            return cfg
        with open(path, "r") as f:
            raw = json.load(f)
        known = {f.name for f in fields(RegistryConfig)}
        return RegistryConfig(**{k: v for k, v in raw.items() if k in known})
