"""Telegram update handlers.

Translate inbound updates into dialogue calls and dialogue replies into
Telegram messages. Story generation is started as a background task so a
long-running generation never holds up other users' updates.
"""

import logging
from typing import Optional, Union

from telegram import Message, ReplyKeyboardMarkup, ReplyKeyboardRemove, Update
from telegram.constants import ParseMode
from telegram.ext import ContextTypes

from ..core.dialogue import DialogueStateMachine
from ..core.types import Reply, StoryRequest
from ..services.story_generation import GenerationGateway, generate_story

logger = logging.getLogger(__name__)

DIALOGUE_KEY = "dialogue"
GATEWAY_KEY = "gateway"


class TelegramStoryChannel:
    """Delivers generated stories as replies in the originating chat."""

    def __init__(self, message: Message):
        self.message = message

    async def send_text(self, text: str, html: bool = False) -> None:
        await self.message.reply_text(text, parse_mode=ParseMode.HTML if html else None)

    async def send_photo(self, photo: str, caption: str) -> None:
        await self.message.reply_photo(photo, caption=caption, parse_mode=ParseMode.HTML)


def reply_markup_for(reply: Reply) -> Optional[Union[ReplyKeyboardMarkup, ReplyKeyboardRemove]]:
    """Build the keyboard markup for a dialogue reply, one option per row."""
    if reply.keyboard:
        return ReplyKeyboardMarkup(
            [[option] for option in reply.keyboard],
            one_time_keyboard=True,
            resize_keyboard=True,
        )
    if reply.remove_keyboard:
        return ReplyKeyboardRemove()
    return None


async def send_replies(message: Message, replies: list[Reply]) -> None:
    for reply in replies:
        await message.reply_text(reply.text, reply_markup=reply_markup_for(reply))


async def start_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /start: begin a new story dialogue."""
    dialogue: DialogueStateMachine = context.bot_data[DIALOGUE_KEY]
    replies = dialogue.start(update.effective_user.id)
    await send_replies(update.effective_message, replies)


async def handle_text(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle any other text message as an answer to the current question."""
    message = update.effective_message
    user_id = update.effective_user.id
    dialogue: DialogueStateMachine = context.bot_data[DIALOGUE_KEY]
    gateway: GenerationGateway = context.bot_data[GATEWAY_KEY]

    def dispatch(request: StoryRequest) -> None:
        context.application.create_task(
            generate_story(request, TelegramStoryChannel(message), gateway, user_id=user_id),
            update=update,
        )

    replies = dialogue.handle(user_id, message.text, dispatch)
    await send_replies(message, replies)


async def on_error(update: object, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Log exceptions raised while handling an update."""
    user_id = None
    if isinstance(update, Update) and update.effective_user:
        user_id = update.effective_user.id
    logger.error(
        f"Unhandled error while processing update: {context.error}",
        extra={"user_id": user_id},
        exc_info=context.error,
    )
