import asyncio
from types import SimpleNamespace

from handlers.inspiration_handler import (
    APOLOGY,
    GONE,
    InspirationCallbackHandler,
    InspirationCreateHandler,
    InspirationEditHandler,
    parse_page,
)
from models.paged import PagedResult
from models.update import CallbackUpdate, MediaUpdate, TextUpdate
from routing.dispatcher import Dispatcher
from routing.command_router import CommandRouter
from routing.registry import HandlerRegistry
from routing.update_router import UpdateRouter
from services.errors import NotFoundError
from state.inspiration import EditContext, EditField, InspirationCreateIntentStore, InspirationEditStore

USER = 1
CHAT = 10


class FakeInspirationService:
    def __init__(self, fail=False, missing=False):
        self.fail = fail
        self.missing = missing
        self.calls = []
        self.favorite = False
        self.gate = None

    async def _wait(self):
        if self.gate is not None:
            await self.gate.wait()
        else:
            await asyncio.sleep(0)

    async def add(self, telegram_id, caption, image_file_id):
        self.calls.append(("add", telegram_id, caption, image_file_id))
        await self._wait()
        if self.fail:
            raise RuntimeError("db down")
        return SimpleNamespace(id="E1", content=caption, image_file_id=image_file_id)

    async def _update(self, name, inspiration_id, value):
        self.calls.append((name, inspiration_id, value))
        await self._wait()
        if self.fail:
            raise RuntimeError("db down")
        if self.missing:
            raise NotFoundError("Inspiration", inspiration_id)

    async def update_content(self, inspiration_id, content):
        await self._update("update_content", inspiration_id, content)

    async def update_tags(self, inspiration_id, tags):
        await self._update("update_tags", inspiration_id, tags)

    async def update_label(self, inspiration_id, label):
        await self._update("update_label", inspiration_id, label)

    async def toggle_favorite(self, inspiration_id):
        self.favorite = not self.favorite
        return self.favorite

    async def get_page(self, telegram_id, page, page_size):
        self.calls.append(("get_page", telegram_id, page, page_size))
        items = [SimpleNamespace(id=f"E{i}", content=f"c{i}", image_file_id=f"f{i}") for i in range(2)]
        return PagedResult(page=page, page_size=page_size, total_count=7, items=items)

    async def delete(self, inspiration_id):
        self.calls.append(("delete", inspiration_id))
        return not self.missing


def _wire(bot, service):
    intents, edits = InspirationCreateIntentStore(), InspirationEditStore()
    handlers = [
        InspirationCallbackHandler(bot, service, edits, intents, page_size=2),
        InspirationCreateHandler(bot, service, intents),
        InspirationEditHandler(bot, service, edits),
    ]
    registry = HandlerRegistry([], handlers)
    return Dispatcher(bot, CommandRouter(registry), UpdateRouter(registry)), intents, edits


def _callback(data, message_id=None):
    return CallbackUpdate(user_id=USER, chat_id=CHAT, data=data, callback_id="cb", message_id=message_id)


# ── Create flow ───────────────────────────────────────────

def test_add_then_photo_saves_once(bot):
    service = FakeInspirationService()
    dispatcher, intents, _ = _wire(bot, service)

    asyncio.run(dispatcher.dispatch(_callback("insp_add")))
    assert USER in intents

    asyncio.run(dispatcher.dispatch(MediaUpdate(USER, CHAT, caption="sunset", media_ref="F1")))
    asyncio.run(dispatcher.dispatch(MediaUpdate(USER, CHAT, caption="sunset", media_ref="F2")))

    assert service.calls == [("add", USER, "sunset", "F1")]
    assert USER not in intents
    saved = bot.messages[-1]
    assert saved["text"].startswith("✅")
    assert saved["reply_markup"] is not None
    assert bot.answered == ["cb"]


def test_photo_without_caption_keeps_intent(bot):
    service = FakeInspirationService()
    dispatcher, intents, _ = _wire(bot, service)
    intents.enable(USER)

    asyncio.run(dispatcher.dispatch(MediaUpdate(USER, CHAT, caption="  ", media_ref="F1")))

    assert service.calls == []
    assert USER in intents


def test_photo_without_intent_is_ignored(bot):
    service = FakeInspirationService()
    dispatcher, _, _ = _wire(bot, service)

    asyncio.run(dispatcher.dispatch(MediaUpdate(USER, CHAT, caption="sunset", media_ref="F1")))

    assert service.calls == []
    assert bot.messages == []


def test_failed_save_apologises_and_intent_stays_consumed(bot):
    service = FakeInspirationService(fail=True)
    dispatcher, intents, _ = _wire(bot, service)
    intents.enable(USER)

    asyncio.run(dispatcher.dispatch(MediaUpdate(USER, CHAT, caption="sunset", media_ref="F1")))

    assert USER not in intents
    assert len(bot.messages) == 1
    assert "Couldn't save" in bot.texts[0]


# ── Edit flow ─────────────────────────────────────────────

def test_edit_button_then_text_updates_content(bot):
    service = FakeInspirationService()
    dispatcher, _, edits = _wire(bot, service)

    asyncio.run(dispatcher.dispatch(_callback("insp_edit:E1")))
    assert edits.try_get(USER) == EditContext("E1", EditField.CONTENT)

    asyncio.run(dispatcher.dispatch(TextUpdate(USER, CHAT, "new text")))

    assert service.calls == [("update_content", "E1", "new text")]
    assert edits.try_get(USER) is None
    assert bot.texts[-1] == "✅ Inspiration updated."


def test_second_text_after_edit_is_not_an_edit(bot):
    service = FakeInspirationService()
    dispatcher, _, edits = _wire(bot, service)
    edits.set(USER, EditContext("E1", EditField.LABEL))

    asyncio.run(dispatcher.dispatch(TextUpdate(USER, CHAT, "travel")))
    asyncio.run(dispatcher.dispatch(TextUpdate(USER, CHAT, "again")))

    assert service.calls == [("update_label", "E1", "travel")]


def test_tags_are_split_and_trimmed(bot):
    service = FakeInspirationService()
    dispatcher, _, edits = _wire(bot, service)
    edits.set(USER, EditContext("E1", EditField.TAGS))

    asyncio.run(dispatcher.dispatch(TextUpdate(USER, CHAT, " sunset, beach ,, ")))

    assert service.calls == [("update_tags", "E1", ["sunset", "beach"])]


def test_failed_edit_still_clears_context(bot):
    service = FakeInspirationService(fail=True)
    dispatcher, _, edits = _wire(bot, service)
    edits.set(USER, EditContext("E1", EditField.CONTENT))

    asyncio.run(dispatcher.dispatch(TextUpdate(USER, CHAT, "new text")))

    assert edits.try_get(USER) is None
    assert bot.texts == [APOLOGY]


def test_edit_of_missing_inspiration_reports_gone(bot):
    service = FakeInspirationService(missing=True)
    dispatcher, _, edits = _wire(bot, service)
    edits.set(USER, EditContext("E9", EditField.CONTENT))

    asyncio.run(dispatcher.dispatch(TextUpdate(USER, CHAT, "new text")))

    assert edits.try_get(USER) is None
    assert bot.texts == [GONE]


def test_choosing_another_field_replaces_context(bot):
    service = FakeInspirationService()
    dispatcher, _, edits = _wire(bot, service)

    asyncio.run(dispatcher.dispatch(_callback("insp_edit:E1")))
    asyncio.run(dispatcher.dispatch(_callback("insp_label:E2")))

    assert edits.try_get(USER) == EditContext("E2", EditField.LABEL)


# ── Concurrent updates from one user ──────────────────────

def test_two_concurrent_photos_after_one_add_save_once(bot):
    service = FakeInspirationService()
    dispatcher, intents, _ = _wire(bot, service)
    intents.enable(USER)

    async def scenario():
        await asyncio.gather(
            dispatcher.dispatch(MediaUpdate(USER, CHAT, caption="sunset", media_ref="F1")),
            dispatcher.dispatch(MediaUpdate(USER, CHAT, caption="sunrise", media_ref="F2")),
        )

    asyncio.run(scenario())

    assert [c[0] for c in service.calls] == ["add"]
    assert USER not in intents
    assert len(bot.messages) == 1


def test_two_concurrent_texts_apply_one_edit(bot):
    service = FakeInspirationService()
    dispatcher, _, edits = _wire(bot, service)
    edits.set(USER, EditContext("E1", EditField.CONTENT))

    async def scenario():
        await asyncio.gather(
            dispatcher.dispatch(TextUpdate(USER, CHAT, "first")),
            dispatcher.dispatch(TextUpdate(USER, CHAT, "stray")),
        )

    asyncio.run(scenario())

    assert service.calls == [("update_content", "E1", "first")]
    assert edits.try_get(USER) is None
    assert bot.texts == ["✅ Inspiration updated."]


def test_new_edit_button_during_running_edit_is_kept(bot):
    service = FakeInspirationService()
    dispatcher, _, edits = _wire(bot, service)
    edits.set(USER, EditContext("E1", EditField.CONTENT))

    async def scenario():
        service.gate = asyncio.Event()
        running = asyncio.create_task(dispatcher.dispatch(TextUpdate(USER, CHAT, "new text")))
        await asyncio.sleep(0)
        await dispatcher.dispatch(_callback("insp_label:E2"))
        service.gate.set()
        await running

    asyncio.run(scenario())

    assert service.calls == [("update_content", "E1", "new text")]
    assert edits.try_get(USER) == EditContext("E2", EditField.LABEL)

    asyncio.run(dispatcher.dispatch(TextUpdate(USER, CHAT, "travel")))

    assert service.calls[-1] == ("update_label", "E2", "travel")


# ── Other callbacks ───────────────────────────────────────

def test_list_sends_page_with_pagination(bot):
    service = FakeInspirationService()
    dispatcher, _, _ = _wire(bot, service)

    asyncio.run(dispatcher.dispatch(_callback("insp_list:1")))

    assert service.calls == [("get_page", USER, 1, 2)]
    assert [p["photo"] for p in bot.photos] == ["f0", "f1"]
    assert bot.texts == ["Page 2"]
    data = [b.callback_data for b in bot.messages[0]["reply_markup"].inline_keyboard[0]]
    assert data == ["insp_list:0", "insp_list:2"]


def test_delete_confirm_does_not_delete(bot):
    service = FakeInspirationService()
    dispatcher, _, _ = _wire(bot, service)

    asyncio.run(dispatcher.dispatch(_callback("insp_delete_confirm:E1")))
    assert service.calls == []

    asyncio.run(dispatcher.dispatch(_callback("insp_delete:E1")))
    assert service.calls == [("delete", "E1")]


def test_toggle_favorite_edits_markup_in_place(bot):
    service = FakeInspirationService()
    dispatcher, _, _ = _wire(bot, service)

    asyncio.run(dispatcher.dispatch(_callback("insp_fav:E1", message_id=55)))

    assert bot.edited_markups[0]["message_id"] == 55
    assert bot.messages == []


def test_parse_page():
    assert parse_page(None) == 0
    assert parse_page("") == 0
    assert parse_page("3") == 3
    assert parse_page("-2") == 0
    assert parse_page("abc") == 0
