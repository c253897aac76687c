from .config import config

__version__ = "0.1.0"
