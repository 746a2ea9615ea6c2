import importlib
import os
from types import ModuleType
from typing import Optional

_SETTINGS_BY_ENV = {
    "prod": "config.production",
    "production": "config.production",
    "test": "config.testing",
    "testing": "config.testing",
}


def get_settings_module(env: Optional[str] = None) -> str:
    # APP_ENV quyết định module cấu hình; giá trị lạ rơi về development
    env = (env or os.getenv("APP_ENV", "development")).lower()
    return _SETTINGS_BY_ENV.get(env, "config.development")


def load_settings(env: Optional[str] = None) -> ModuleType:
    return importlib.import_module(get_settings_module(env))
