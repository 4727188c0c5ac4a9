#!filepath: deoptlens/config/app_config.py
import os

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel

from .log_config import LogConfig
from .view_config import ViewConfig
from deoptlens.utils.logger import logs


def project_root() -> str:
    """
    deoptlens/config/app_config.py → deoptlens/config → deoptlens → project root
    """
    return os.path.abspath(os.path.join(os.path.dirname(__file__), "../../"))


def default_config_path() -> str:
    return os.path.join(os.path.dirname(os.path.abspath(__file__)), "base.yml")


class AppConfig(BaseModel):
    log: LogConfig = LogConfig()
    view: ViewConfig = ViewConfig()

    @classmethod
    def load(cls, path: str | None = None) -> "AppConfig":
        """
        Load YAML config + .env
        - defaults to deoptlens/config/base.yml
        - DEOPTLENS_LOG_LEVEL overrides log.level
        """
        load_dotenv(os.path.join(project_root(), ".env"))

        if path is None:
            path = default_config_path()

        if not os.path.exists(path):
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        level = os.getenv("DEOPTLENS_LOG_LEVEL")
        if level:
            raw.setdefault("log", {})["level"] = level

        logs.debug(f"[config] loaded {path}")
        return cls(**raw)
