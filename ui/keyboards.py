"""
ui/keyboards.py
---------------
Inline and reply keyboards for the weather and inspiration features.
Callback data follows `<action>[:<arg>]`.
"""

from typing import Optional

from telegram import (
    InlineKeyboardButton,
    InlineKeyboardMarkup,
    KeyboardButton,
    ReplyKeyboardMarkup,
)

from ui.buttons import InspirationActions as Insp
from ui.buttons import Texts, WeatherActions


def _button(text: str, data: str) -> InlineKeyboardButton:
    return InlineKeyboardButton(text, callback_data=data)


# ── Weather ───────────────────────────────────────────────

def request_location_menu() -> ReplyKeyboardMarkup:
    """Reply keyboard that triggers Telegram's native location prompt."""
    return ReplyKeyboardMarkup(
        [[KeyboardButton(Texts.SEND_LOCATION, request_location=True)]],
        resize_keyboard=True,
        one_time_keyboard=False,
    )


def weather_menu() -> InlineKeyboardMarkup:
    return InlineKeyboardMarkup([
        [
            _button(Texts.WEATHER_CURRENT, WeatherActions.CURRENT),
            _button(Texts.WEATHER_HOURLY, WeatherActions.HOURLY),
        ],
        [
            _button(Texts.WEATHER_DAILY, WeatherActions.DAILY),
            _button(Texts.WEATHER_WEEKLY, WeatherActions.WEEKLY),
        ],
        [_button(Texts.WEATHER_SEARCH_CITY, WeatherActions.SEARCH_CITY)],
    ])


# ── Inspirations ──────────────────────────────────────────

def inspirations_menu() -> InlineKeyboardMarkup:
    return InlineKeyboardMarkup([
        [_button(Texts.INSP_LIST, Insp.LIST)],
        [_button(Texts.INSP_ADD, Insp.ADD)],
    ])


def inspiration_single(inspiration_id: str, favorite: bool) -> InlineKeyboardMarkup:
    """Actions under a single opened inspiration."""
    fav_text = Texts.INSP_UNFAVORITE if favorite else Texts.INSP_NOT_FAVORITE
    return InlineKeyboardMarkup([
        [
            _button(fav_text, f"{Insp.TOGGLE_FAVORITE}:{inspiration_id}"),
            _button(Texts.INSP_EDIT, f"{Insp.EDIT}:{inspiration_id}"),
        ],
        [
            _button(Texts.INSP_TAGS, f"{Insp.TAGS}:{inspiration_id}"),
            _button(Texts.INSP_LABEL, f"{Insp.LABEL}:{inspiration_id}"),
        ],
        [_button(Texts.INSP_DELETE, f"{Insp.DELETE_CONFIRM}:{inspiration_id}")],
    ])


def inspiration_list_item(inspiration_id: str) -> InlineKeyboardMarkup:
    return InlineKeyboardMarkup([[
        _button(Texts.INSP_VIEW, f"{Insp.VIEW}:{inspiration_id}"),
        _button(Texts.INSP_DELETE, f"{Insp.DELETE_CONFIRM}:{inspiration_id}"),
    ]])


def pagination(page: int, has_prev: bool, has_next: bool) -> Optional[InlineKeyboardMarkup]:
    """Prev/next buttons for a page of inspirations, or None on a single page."""
    buttons = []
    if has_prev:
        buttons.append(_button(Texts.PREV, f"{Insp.LIST}:{page - 1}"))
    if has_next:
        buttons.append(_button(Texts.NEXT, f"{Insp.LIST}:{page + 1}"))
    return InlineKeyboardMarkup([buttons]) if buttons else None


def delete_confirm(inspiration_id: str) -> InlineKeyboardMarkup:
    return InlineKeyboardMarkup([[
        _button(Texts.INSP_CONFIRM, f"{Insp.DELETE}:{inspiration_id}"),
        _button(Texts.INSP_CANCEL, Insp.CANCEL),
    ]])


def enhance(inspiration_id: str) -> InlineKeyboardMarkup:
    """Shown right after an inspiration is saved."""
    return InlineKeyboardMarkup([
        [
            _button(Texts.INSP_FAVORITE, f"{Insp.TOGGLE_FAVORITE}:{inspiration_id}"),
            _button(Texts.INSP_EDIT, f"{Insp.EDIT}:{inspiration_id}"),
        ],
        [_button(Texts.INSP_TAGS, f"{Insp.TAGS}:{inspiration_id}")],
    ])
