import asyncio
from types import SimpleNamespace

from handlers.idea_handler import IdeaCommandHandler
from handlers.note_handler import NoteCommandHandler
from handlers.start_handler import HELP_TEXT, HelpCommandHandler, StartCommandHandler
from main import StateStores, build_registry
from models.update import TextUpdate
from state.inspiration import InspirationCreateIntentStore, InspirationEditStore
from state.weather import CitySearchStore


class FakeUserService:
    def __init__(self, existing=None, fail=False):
        self.existing = existing
        self.fail = fail
        self.added = []

    async def get_by_telegram_id(self, telegram_id):
        if self.fail:
            raise RuntimeError("db down")
        return self.existing

    async def add(self, telegram_id, username="", first_name=""):
        self.added.append((telegram_id, username, first_name))


class FakeIdeaService:
    def __init__(self):
        self.ideas = []

    async def add(self, telegram_id, content):
        self.ideas.append(content)

    async def list_for_user(self, telegram_id):
        return [f"💭 Idea: {c}" for c in self.ideas]


def test_start_registers_new_user(bot):
    users = FakeUserService()

    asyncio.run(StartCommandHandler(bot, users).handle(TextUpdate(1, 10, "/start", first_name="Ana", username="ana")))

    assert users.added == [(1, "ana", "Ana")]
    assert bot.texts[0].startswith("Hello Ana!")
    assert bot.messages[0]["reply_markup"] is not None


def test_start_welcomes_back_existing_user(bot):
    users = FakeUserService(existing=SimpleNamespace(telegram_id=1))

    asyncio.run(StartCommandHandler(bot, users).handle(TextUpdate(1, 10, "/start", first_name="Ana")))

    assert users.added == []
    assert bot.texts == ["Welcome back, Ana! 🎉"]


def test_start_apologises_on_failure(bot):
    asyncio.run(StartCommandHandler(bot, FakeUserService(fail=True)).handle(TextUpdate(1, 10, "/start")))

    assert len(bot.messages) == 1
    assert bot.texts[0].startswith("⚠️")


def test_help(bot):
    asyncio.run(HelpCommandHandler(bot).handle(TextUpdate(1, 10, "/help")))

    assert bot.messages[0]["text"] == HELP_TEXT
    assert bot.messages[0]["parse_mode"] == "Markdown"


def test_ideas_create_then_list(bot):
    ideas = FakeIdeaService()
    handler = IdeaCommandHandler(bot, ideas)

    asyncio.run(handler.handle(TextUpdate(1, 10, "/ideas create Build a birdhouse")))
    asyncio.run(handler.handle(TextUpdate(1, 10, "/ideas list")))

    assert ideas.ideas == ["Build a birdhouse"]
    assert bot.texts == ["💡 Idea saved!", "💭 Idea: Build a birdhouse"]


def test_notes_without_arguments_shows_usage(bot):
    asyncio.run(NoteCommandHandler(bot).handle(TextUpdate(1, 10, "/notes")))

    assert bot.texts[0].startswith("Use:")


def test_build_registry_wires_every_command_and_priority():
    services = SimpleNamespace(users=None, inspirations=None, ideas=None, weather=None)
    stores = StateStores(InspirationCreateIntentStore(), InspirationEditStore(), CitySearchStore())

    registry = build_registry(SimpleNamespace(), services, stores)

    assert sorted(registry.commands) == ["/help", "/ideas", "/inspirations", "/notes", "/start", "/weather"]
    assert [repr(h) for h in registry.update_handlers] == [
        "InspirationCallbackHandler",
        "WeatherCallbackHandler",
        "WeatherLocationHandler",
        "InspirationCreateHandler",
        "InspirationEditHandler",
        "WeatherSearchCityHandler",
    ]
