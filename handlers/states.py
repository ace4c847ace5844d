"""FSM для опроса"""
from aiogram.fsm.state import State, StatesGroup


class SurveyFSM(StatesGroup):
    """Состояния опроса"""
    # Личные данные
    full_name = State()
    email = State()
    date_of_birth = State()
    contact_number = State()

    # Любимая еда (мультивыбор)
    favorite_foods = State()

    # Оценка утверждений
    statement_rating = State()
