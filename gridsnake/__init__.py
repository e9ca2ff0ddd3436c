from .config import AppConfig, DIFFICULTY_INTERVALS

__version__ = "0.1.0"
