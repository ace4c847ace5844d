from .common import (
    get_main_menu_keyboard,
    get_back_to_menu_keyboard,
)
from .survey import (
    get_food_keyboard,
    get_rating_keyboard,
)

__all__ = [
    "get_main_menu_keyboard",
    "get_back_to_menu_keyboard",
    "get_food_keyboard",
    "get_rating_keyboard",
]
