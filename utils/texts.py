"""Тексты сообщений бота"""

TEXTS = {
    "start_welcome": (
        "👋 Welcome!\n\n"
        "This short survey asks for a few personal details, your favorite foods "
        "and how much you agree with four statements."
    ),
    "about_bot": (
        "ℹ️ About\n\n"
        "Your name, email, contact number, date of birth and answers are stored "
        "with your response. Administrators see individual responses and "
        "aggregate statistics: average age, favorite foods and average ratings."
    ),
    "help_text": (
        "/start — main menu\n"
        "/survey — take the survey\n"
        "/cancel — cancel the survey in progress\n"
        "/help — this message"
    ),
    "main_menu": "Main menu",
    "btn_start_survey": "📝 Take the survey",
    "btn_about": "ℹ️ About",
    "btn_main_menu": "🏠 Main menu",
    "btn_next": "➡️ Next",
    "btn_skip": "⏭ Skip",

    "progress": "Step {current} of {total}",
    "ask_full_name": "Please enter your full name.",
    "ask_email": "Please enter your email address.",
    "ask_date_of_birth": "Please enter your date of birth (YYYY-MM-DD).",
    "ask_contact_number": "Please enter your contact number.",
    "ask_foods": "What is your favorite food? Select one or more and press Next.",
    "ask_statement": "Rate the statement:\n\n«{text}»",

    "invalid_full_name": "Please enter your full name (up to 100 characters).",
    "invalid_email": "Please enter a valid email address (up to 100 characters).",
    "invalid_date_of_birth": "Please enter the date as YYYY-MM-DD.",
    "age_too_young": "Age must be at least 5 years old.",
    "age_too_old": "Age cannot be more than 120 years old.",
    "invalid_contact_number": "Please enter a valid contact number (10 to 20 characters).",
    "no_food_selected": "Please select at least one favorite food.",

    "survey_submitted": "✅ Survey submitted successfully! Survey ID: {survey_id}",
    "survey_failed": "⚠️ An error occurred while submitting the survey. Please try again later.",
    "survey_invalid": "⚠️ The survey could not be accepted:\n{problems}",
    "survey_cancelled": "Survey cancelled.",
    "nothing_to_cancel": "There is no survey in progress.",
}


def get_text(key: str, **kwargs) -> str:
    """Получить текст по ключу"""
    text = TEXTS.get(key, key)
    if kwargs:
        return text.format(**kwargs)
    return text
