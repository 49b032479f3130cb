"""
Shared fakes for handler and routing tests.
"""

import pytest


class FakeBot:
    """Records every outgoing Telegram call instead of sending it."""

    def __init__(self):
        self.messages = []
        self.photos = []
        self.answered = []
        self.edited_markups = []

    async def send_message(self, chat_id, text, reply_markup=None, parse_mode=None):
        self.messages.append({"chat_id": chat_id, "text": text, "reply_markup": reply_markup, "parse_mode": parse_mode})

    async def send_photo(self, chat_id, photo, caption=None, reply_markup=None):
        self.photos.append({"chat_id": chat_id, "photo": photo, "caption": caption, "reply_markup": reply_markup})

    async def answer_callback_query(self, callback_query_id):
        self.answered.append(callback_query_id)

    async def edit_message_reply_markup(self, chat_id, message_id, reply_markup=None):
        self.edited_markups.append({"chat_id": chat_id, "message_id": message_id, "reply_markup": reply_markup})

    @property
    def texts(self):
        return [m["text"] for m in self.messages]


@pytest.fixture
def bot():
    return FakeBot()
