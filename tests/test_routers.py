import asyncio

from models.update import CallbackUpdate, TextUpdate
from routing.command_router import CommandRouter
from routing.contracts import CommandHandler, UpdateHandler
from routing.registry import HandlerRegistry
from routing.update_router import UpdateRouter


class _RecordingCommand(CommandHandler):
    def __init__(self, command):
        self.command = command
        self.seen = []

    async def handle(self, update):
        self.seen.append(update)


class _RecordingUpdate(UpdateHandler):
    def __init__(self, accepts):
        self.accepts = accepts
        self.asked = 0
        self.seen = []

    def can_handle(self, update):
        self.asked += 1
        return self.accepts

    async def handle(self, update):
        self.seen.append(update)


def _text(text):
    return TextUpdate(user_id=1, chat_id=10, text=text)


# ── CommandRouter ─────────────────────────────────────────

def test_command_router_runs_handler_for_first_token():
    start = _RecordingCommand("/start")
    router = CommandRouter(HandlerRegistry([start], []))

    update = _text("/START now please")
    assert asyncio.run(router.route(update)) is True
    assert start.seen == [update]


def test_command_router_misses_without_raising():
    router = CommandRouter(HandlerRegistry([_RecordingCommand("/start")], []))

    assert asyncio.run(router.route(_text("/unknown"))) is False
    assert asyncio.run(router.route(_text("/star"))) is False
    assert asyncio.run(router.route(_text(""))) is False
    assert asyncio.run(router.route(_text("   "))) is False
    assert asyncio.run(router.route(CallbackUpdate(user_id=1, chat_id=10, data="/start"))) is False


# ── UpdateRouter ──────────────────────────────────────────

def test_update_router_first_match_wins():
    a, b, c = _RecordingUpdate(False), _RecordingUpdate(True), _RecordingUpdate(True)
    router = UpdateRouter(HandlerRegistry([], [a, b, c]))

    update = _text("hello")
    assert asyncio.run(router.route(update)) is b
    assert a.seen == [] and c.seen == []
    assert b.seen == [update]
    assert c.asked == 0


def test_update_router_no_match_is_silent():
    a = _RecordingUpdate(False)
    router = UpdateRouter(HandlerRegistry([], [a]))

    assert asyncio.run(router.route(_text("hello"))) is None
    assert a.asked == 1
