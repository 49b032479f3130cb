"""
ui/buttons.py
-------------
Single source of truth for command identifiers, callback actions and
button labels, plus the main-menu keyboard.
"""

from telegram import ReplyKeyboardMarkup


class Commands:
    START = "/start"
    HELP = "/help"
    SONGS = "/songs"
    QUOTES = "/quotes"
    WEATHER = "/weather"
    NOTES = "/notes"
    IDEAS = "/ideas"
    INSPIRATIONS = "/inspirations"
    SETTINGS = "/settings"


class WeatherActions:
    PREFIX = "weather_"
    CURRENT = "weather_current"
    HOURLY = "weather_hourly"
    DAILY = "weather_daily"
    WEEKLY = "weather_weekly"
    SEARCH_CITY = "weather_search"


class InspirationActions:
    PREFIX = "insp_"
    ADD = "insp_add"
    LIST = "insp_list"
    VIEW = "insp_view"
    EDIT = "insp_edit"
    TAGS = "insp_tags"
    LABEL = "insp_label"
    TOGGLE_FAVORITE = "insp_fav"
    DELETE_CONFIRM = "insp_delete_confirm"
    DELETE = "insp_delete"
    CANCEL = "insp_cancel"


class Texts:
    SONGS = "🎵 Songs"
    QUOTES = "💬 Quotes"
    WEATHER = "🌤 Weather"
    NOTES = "📝 Notes"
    IDEAS = "💡 Ideas"
    INSPIRATIONS = "🎀 Inspirations"
    SETTINGS = "⚙ Settings"
    HELP = "❓ Help"

    WEATHER_CURRENT = "🌦 Current weather"
    WEATHER_HOURLY = "⏱ Hourly forecast"
    WEATHER_DAILY = "📆 Daily forecast"
    WEATHER_WEEKLY = "📅 Weekly forecast"
    WEATHER_SEARCH_CITY = "🔍 Search city"
    SEND_LOCATION = "📍 Send my location"

    INSP_ADD = "➕ Add Inspiration"
    INSP_LIST = "📖 List Inspirations"
    INSP_VIEW = "👁 View"
    INSP_EDIT = "✏ Edit"
    INSP_TAGS = "🏷 Tags"
    INSP_LABEL = "📂 Label"
    INSP_FAVORITE = "⭐ Favorite"
    INSP_UNFAVORITE = "⭐ Unfavorite"
    INSP_NOT_FAVORITE = "☆ Favorite"
    INSP_DELETE = "🗑 Delete"
    INSP_CONFIRM = "✅ Yes"
    INSP_CANCEL = "❌ Cancel"
    PREV = "⬅ Prev"
    NEXT = "Next ➡"


# Persistent main-menu labels -> the command they stand for.
# Labels without a registered command fall through to the fallback reply.
GLOBAL_BUTTONS_TO_COMMAND: dict[str, str] = {
    Texts.SONGS: Commands.SONGS,
    Texts.QUOTES: Commands.QUOTES,
    Texts.WEATHER: Commands.WEATHER,
    Texts.NOTES: Commands.NOTES,
    Texts.IDEAS: Commands.IDEAS,
    Texts.INSPIRATIONS: Commands.INSPIRATIONS,
    Texts.SETTINGS: Commands.SETTINGS,
    Texts.HELP: Commands.HELP,
}


def start_menu() -> ReplyKeyboardMarkup:
    """The persistent main-menu keyboard shown after /start."""
    return ReplyKeyboardMarkup(
        [
            [Texts.SONGS, Texts.WEATHER],
            [Texts.QUOTES, Texts.NOTES],
            [Texts.IDEAS, Texts.INSPIRATIONS],
            [Texts.SETTINGS, Texts.HELP],
        ],
        resize_keyboard=True,
        one_time_keyboard=False,
        is_persistent=True,
        input_field_placeholder="Choose an option...",
    )
