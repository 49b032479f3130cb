"""
handlers/inspiration_handler.py
--------------------------------
Inspirations: photos saved with a caption.

Two conversational flows live here:
    create: "➕ Add" button  → intent set  → next photo+caption is saved
    edit:   "✏ Edit" button  → edit context → next text replaces the field
Both states are single-step and are cleared exactly once per operation.
"""

from typing import Optional

from telegram import Bot

from config import INSPIRATIONS_PAGE_SIZE
from models.update import BotUpdate, CallbackUpdate, MediaUpdate, TextUpdate
from routing.contracts import CommandHandler, UpdateHandler
from services.errors import NotFoundError
from services.inspiration_service import InspirationService, split_tags
from state.inspiration import (
    EditContext,
    EditField,
    InspirationCreateIntentStore,
    InspirationEditStore,
)
from ui import keyboards
from ui.buttons import Commands
from ui.buttons import InspirationActions as Actions
from utils.logger import get_logger

logger = get_logger(__name__)

APOLOGY = "⚠️ Something went wrong. Please try again."
GONE = "⚠️ That inspiration no longer exists."

_EDIT_ACTIONS = {
    Actions.EDIT: EditField.CONTENT,
    Actions.TAGS: EditField.TAGS,
    Actions.LABEL: EditField.LABEL,
}

_EDIT_PROMPTS = {
    EditField.CONTENT: "✏ Send the new caption.",
    EditField.TAGS: "🏷 Send tags separated by commas (e.g. sunset, beach).",
    EditField.LABEL: "📂 Send the new label.",
}


def parse_page(arg: Optional[str]) -> int:
    """Page number from `insp_list:<page>`; missing or malformed means the first page."""
    try:
        return max(int(arg), 0) if arg else 0
    except ValueError:
        return 0


class InspirationCommandHandler(CommandHandler):
    """Handles /inspirations by showing the inspirations menu."""

    command = Commands.INSPIRATIONS

    def __init__(self, bot: Bot):
        self.bot = bot

    async def handle(self, update: BotUpdate) -> None:
        await self.bot.send_message(
            chat_id=update.chat_id,
            text="🎀 Inspirations\n\nSave images + captions for later inspiration.",
            reply_markup=keyboards.inspirations_menu(),
        )


class InspirationCallbackHandler(UpdateHandler):
    """
    Handles every `insp_*` callback.

    Callback data is `<action>[:<id or page>]`; actions are matched exactly,
    so `insp_delete_confirm` never triggers `insp_delete`.
    """

    def __init__(
        self,
        bot: Bot,
        inspiration_service: InspirationService,
        edit_store: InspirationEditStore,
        create_intents: InspirationCreateIntentStore,
        page_size: int = INSPIRATIONS_PAGE_SIZE,
    ):
        self.bot = bot
        self.inspiration_service = inspiration_service
        self.edit_store = edit_store
        self.create_intents = create_intents
        self.page_size = page_size

    def can_handle(self, update: BotUpdate) -> bool:
        return isinstance(update, CallbackUpdate) and update.data.startswith(Actions.PREFIX)

    async def handle(self, update: BotUpdate) -> None:
        if update.callback_id:
            await self.bot.answer_callback_query(update.callback_id)

        action, _, arg = update.data.partition(":")
        chat_id = update.chat_id

        if action == Actions.ADD:
            self.create_intents.enable(update.user_id)
            await self.bot.send_message(chat_id=chat_id, text="📸 Send a photo with a caption.")
            return

        if action in _EDIT_ACTIONS:
            if not arg:
                return
            field = _EDIT_ACTIONS[action]
            self.edit_store.set(update.user_id, EditContext(target_entity_id=arg, field=field))
            await self.bot.send_message(chat_id=chat_id, text=_EDIT_PROMPTS[field])
            return

        if action == Actions.CANCEL:
            await self.bot.send_message(chat_id=chat_id, text="❌ Cancelled.")
            return

        if action == Actions.DELETE_CONFIRM and arg:
            await self.bot.send_message(
                chat_id=chat_id,
                text="Are you sure?",
                reply_markup=keyboards.delete_confirm(arg),
            )
            return

        try:
            if action == Actions.LIST:
                await self._send_page(update, parse_page(arg))
            elif action == Actions.VIEW and arg:
                await self._send_single(chat_id, arg)
            elif action == Actions.TOGGLE_FAVORITE and arg:
                await self._toggle_favorite(update, arg)
            elif action == Actions.DELETE and arg:
                deleted = await self.inspiration_service.delete(arg)
                await self.bot.send_message(chat_id=chat_id, text="🗑 Deleted." if deleted else GONE)
            else:
                logger.warning(f"Unknown inspiration callback {update.data!r}")
        except NotFoundError:
            await self.bot.send_message(chat_id=chat_id, text=GONE)
        except Exception as e:
            logger.error(f"Inspiration callback {update.data!r} failed: {e}", exc_info=True)
            await self.bot.send_message(chat_id=chat_id, text=APOLOGY)

    async def _send_page(self, update: CallbackUpdate, page: int) -> None:
        result = await self.inspiration_service.get_page(update.user_id, page, self.page_size)

        if not result.items:
            text = "You have no inspirations yet. Tap ➕ Add to save one." if page == 0 else "No more inspirations."
            await self.bot.send_message(chat_id=update.chat_id, text=text)
            return

        for insp in result.items:
            await self.bot.send_photo(
                chat_id=update.chat_id,
                photo=insp.image_file_id,
                caption=insp.content,
                reply_markup=keyboards.inspiration_list_item(insp.id),
            )

        await self.bot.send_message(
            chat_id=update.chat_id,
            text=f"Page {page + 1}",
            reply_markup=keyboards.pagination(page, result.has_prev, result.has_next),
        )

    async def _send_single(self, chat_id: int, inspiration_id: str) -> None:
        insp = await self.inspiration_service.get_by_id(inspiration_id)
        await self.bot.send_photo(
            chat_id=chat_id,
            photo=insp.image_file_id,
            caption=insp.content,
            reply_markup=keyboards.inspiration_single(insp.id, insp.favorite),
        )

    async def _toggle_favorite(self, update: CallbackUpdate, inspiration_id: str) -> None:
        favorite = await self.inspiration_service.toggle_favorite(inspiration_id)
        markup = keyboards.inspiration_single(inspiration_id, favorite)
        if update.message_id is not None:
            await self.bot.edit_message_reply_markup(
                chat_id=update.chat_id,
                message_id=update.message_id,
                reply_markup=markup,
            )
        else:
            await self.bot.send_message(
                chat_id=update.chat_id,
                text="⭐ Added to favorites." if favorite else "☆ Removed from favorites.",
                reply_markup=markup,
            )


class InspirationCreateHandler(UpdateHandler):
    """
    Saves a photo+caption sent right after the "Add" button.

    `can_handle` consumes the create intent. This is the one predicate with
    a side effect: checking and claiming the intent must happen in one
    atomic step, so a second photo arriving concurrently sees no intent and
    is not saved twice. Once `can_handle` returns True the intent is gone;
    if saving then fails the user has to press "Add" again.
    """

    def __init__(
        self,
        bot: Bot,
        inspiration_service: InspirationService,
        create_intents: InspirationCreateIntentStore,
    ):
        self.bot = bot
        self.inspiration_service = inspiration_service
        self.create_intents = create_intents

    def can_handle(self, update: BotUpdate) -> bool:
        return (
            isinstance(update, MediaUpdate)
            and bool(update.caption.strip())
            and self.create_intents.consume(update.user_id)
        )

    async def handle(self, update: BotUpdate) -> None:
        try:
            created = await self.inspiration_service.add(update.user_id, update.caption, update.media_ref)
        except Exception as e:
            logger.error(f"Failed to save inspiration for user {update.user_id}: {e}", exc_info=True)
            await self.bot.send_message(
                chat_id=update.chat_id,
                text="⚠️ Couldn't save your inspiration. Tap ➕ Add and send it again.",
            )
            return

        await self.bot.send_message(
            chat_id=update.chat_id,
            text="✅ Inspiration saved. You can enhance it:",
            reply_markup=keyboards.enhance(created.id),
        )


class InspirationEditHandler(UpdateHandler):
    """
    Applies the user's next text message to the field chosen with an edit button.

    `handle` takes the edit context out of the store before saving, so every
    attempt, successful or not, ends edit mode and a failed update can never
    leave the user's text stuck in it.
    """

    def __init__(
        self,
        bot: Bot,
        inspiration_service: InspirationService,
        edit_store: InspirationEditStore,
    ):
        self.bot = bot
        self.inspiration_service = inspiration_service
        self.edit_store = edit_store

    def can_handle(self, update: BotUpdate) -> bool:
        return isinstance(update, TextUpdate) and self.edit_store.try_get(update.user_id) is not None

    async def handle(self, update: BotUpdate) -> None:
        # Claimed before any await: a concurrent text finds nothing to apply,
        # and a context set by a new edit button meanwhile is left alone.
        ctx = self.edit_store.take(update.user_id)
        if ctx is None:
            logger.debug(f"Edit context of user {update.user_id} already claimed")
            return

        try:
            await self._apply(ctx, update.text.strip())
            reply = "✅ Inspiration updated."
        except NotFoundError:
            reply = GONE
        except Exception as e:
            logger.error(
                f"Failed to update {ctx.field.value} of inspiration {ctx.target_entity_id}: {e}",
                exc_info=True,
            )
            reply = APOLOGY

        await self.bot.send_message(chat_id=update.chat_id, text=reply)

    async def _apply(self, ctx: EditContext, text: str) -> None:
        if ctx.field is EditField.CONTENT:
            await self.inspiration_service.update_content(ctx.target_entity_id, text)
        elif ctx.field is EditField.TAGS:
            await self.inspiration_service.update_tags(ctx.target_entity_id, split_tags(text))
        else:
            await self.inspiration_service.update_label(ctx.target_entity_id, text)
