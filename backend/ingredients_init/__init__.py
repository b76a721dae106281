from .bootstrap import bootstrap, confirmation_message, load_ingredients
from .config import Settings

__all__ = ["Settings", "bootstrap", "confirmation_message", "load_ingredients"]
