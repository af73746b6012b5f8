"""Global configuration management (~/.xcoder_py.global)."""

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


DEFAULT_BACKEND_URL = "http://127.0.0.1:8731"
BACKEND_URL_ENV = "XCODER_BACKEND_URL"


@dataclass
class GlobalConfig:
    """
    Global configuration storing how to reach the backend.
    Stored at ~/.xcoder_py.global
    """

    backend_url: str = DEFAULT_BACKEND_URL
    # None means requests wait for the backend indefinitely
    request_timeout: Optional[float] = None

    @staticmethod
    def default_path() -> Path:
        return Path.home() / ".xcoder_py.global"

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "GlobalConfig":
        """Load global config from file, then apply the environment override."""
        if path is None:
            path = cls.default_path()

        config = cls()
        if path.exists():
            try:
                with open(path, "r", encoding="utf-8") as f:
                    data = json.load(f)
                config = cls(
                    backend_url=data.get("backend_url") or DEFAULT_BACKEND_URL,
                    request_timeout=data.get("request_timeout"),
                )
            except (json.JSONDecodeError, IOError, AttributeError):
                config = cls()

        env_url = os.environ.get(BACKEND_URL_ENV)
        if env_url:
            config.backend_url = env_url
        return config

    def save(self, path: Optional[Path] = None) -> None:
        """Save global config to file."""
        if path is None:
            path = self.default_path()

        data = {
            "backend_url": self.backend_url,
            "request_timeout": self.request_timeout,
        }
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
