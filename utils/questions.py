"""Словарь анкеты: утверждения, варианты еды и отслеживаемые блюда"""
from typing import NamedTuple, Optional


class Statement(NamedTuple):
    key: str  # имя атрибута в таблице options
    slug: str  # основа имён полей в ответах и статистике
    text: str

    @property
    def response_field(self) -> str:
        return f"{self.slug}_rating"

    @property
    def statistics_field(self) -> str:
        return f"{self.slug}_average_rating"


class TrackedFood(NamedTuple):
    label: str
    slug: str

    @property
    def statistics_field(self) -> str:
        return f"{self.slug}_percentage"


FOOD_PREFIX = "FavoriteFood:"

STATEMENTS = (
    Statement("MovieRating", "movie", "I like to watch movies"),
    Statement("RadioRating", "radio", "I like to listen to radio"),
    Statement("EatOutRating", "eat_out", "I like to eat out"),
    Statement("TVRating", "tv", "I like to watch TV"),
)

# Блюда, по которым считается процент в статистике
TRACKED_FOODS = (
    TrackedFood("Pizza", "pizza"),
    TrackedFood("Pasta", "pasta"),
    TrackedFood("Pap and Wors", "pap_and_wors"),
)

# Варианты, которые бот предлагает на выбор (хранить можно любые)
FOOD_OPTIONS = ["Pizza", "Pasta", "Pap and Wors", "Other"]

RATING_SCALE = {
    1: "Strongly Agree",
    2: "Agree",
    3: "Neutral",
    4: "Disagree",
    5: "Strongly Disagree",
}

MIN_RATING = min(RATING_SCALE)
MAX_RATING = max(RATING_SCALE)

_STATEMENTS_BY_KEY = {s.key: s for s in STATEMENTS}


def get_statement_by_key(key: str) -> Optional[Statement]:
    """Найти утверждение по имени атрибута"""
    return _STATEMENTS_BY_KEY.get(key)


def get_next_statement(key: str) -> Optional[Statement]:
    """Следующее утверждение после key"""
    keys = [s.key for s in STATEMENTS]
    idx = keys.index(key)
    if idx < len(STATEMENTS) - 1:
        return STATEMENTS[idx + 1]
    return None


def get_statement_number(key: str) -> int:
    """Порядковый номер утверждения (с 1)"""
    return next((i + 1 for i, s in enumerate(STATEMENTS) if s.key == key), 0)
