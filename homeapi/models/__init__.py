from .Users import User
from .Resources import Temperature, Switch, Light

__all__ = [
    "User",
    "Temperature",
    "Switch",
    "Light",
]
