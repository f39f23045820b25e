from .main import main
from .settings import CliSettings, load_settings

__all__ = [
    "main",
    "CliSettings",
    "load_settings",
]
