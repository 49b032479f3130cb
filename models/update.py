"""
models/update.py
----------------
The inbound update, reduced to the handful of shapes the bot cares about.

Exactly one shape describes each Telegram update. Handlers receive one of
these values and must not assume fields that belong to another shape.
"""

from dataclasses import dataclass, replace
from typing import Optional, Union

from telegram import Update


@dataclass(frozen=True)
class CallbackUpdate:
    """Inline keyboard button press. `data` is `<namespace>_<action>[:args]`."""
    user_id: int
    chat_id: int
    data: str
    callback_id: str = ""
    message_id: Optional[int] = None


@dataclass(frozen=True)
class LocationUpdate:
    """A shared location."""
    user_id: int
    chat_id: int
    lat: float
    lon: float


@dataclass(frozen=True)
class TextUpdate:
    """A message that carries text. The sender names are only used for greetings."""
    user_id: int
    chat_id: int
    text: str
    first_name: str = ""
    username: str = ""


@dataclass(frozen=True)
class MediaUpdate:
    """A photo message. `media_ref` is the Telegram file id of the largest size."""
    user_id: int
    chat_id: int
    caption: str
    media_ref: str


@dataclass(frozen=True)
class OtherUpdate:
    """Anything the bot does not act on (stickers, edits, joins...)."""
    user_id: Optional[int] = None
    chat_id: Optional[int] = None


BotUpdate = Union[CallbackUpdate, LocationUpdate, TextUpdate, MediaUpdate, OtherUpdate]


def from_telegram(update: Update) -> BotUpdate:
    """
    Classify a python-telegram-bot Update into one BotUpdate shape.

    Callback queries win over messages; within a message, a location wins
    over a photo, and a photo wins over plain text.
    """
    query = update.callback_query
    if query is not None:
        chat_id = query.message.chat.id if query.message else query.from_user.id
        message_id = query.message.message_id if query.message else None
        return CallbackUpdate(
            user_id=query.from_user.id,
            chat_id=chat_id,
            data=query.data or "",
            callback_id=query.id,
            message_id=message_id,
        )

    message = update.message
    if message is None:
        user = update.effective_user
        chat = update.effective_chat
        return OtherUpdate(
            user_id=user.id if user else None,
            chat_id=chat.id if chat else None,
        )

    chat_id = message.chat.id
    user_id = message.from_user.id if message.from_user else chat_id

    if message.location is not None:
        return LocationUpdate(
            user_id=user_id,
            chat_id=chat_id,
            lat=message.location.latitude,
            lon=message.location.longitude,
        )

    if message.photo:
        return MediaUpdate(
            user_id=user_id,
            chat_id=chat_id,
            caption=message.caption or "",
            media_ref=message.photo[-1].file_id,
        )

    if message.text is not None:
        sender = message.from_user
        return TextUpdate(
            user_id=user_id,
            chat_id=chat_id,
            text=message.text,
            first_name=(sender.first_name if sender else None) or "",
            username=(sender.username if sender else None) or "",
        )

    return OtherUpdate(user_id=user_id, chat_id=chat_id)


def synthesize_command(update: TextUpdate, command: str) -> TextUpdate:
    """
    Build a new text update carrying `command`, keeping the sender and chat.

    Used to make persistent keyboard buttons behave like typed commands.
    The original update is left untouched.
    """
    return replace(update, text=command)
