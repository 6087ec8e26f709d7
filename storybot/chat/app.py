"""
Telegram application setup and entry point.

Run with: storybot (or python cli/run_bot.py)
"""

import logging
import signal

from telegram.ext import Application, CommandHandler, MessageHandler, filters

from ..config import LOG_JSON, LOG_LEVEL, get_bot_token
from ..core.dialogue import DialogueStateMachine
from ..core.sessions import SessionStore
from ..logging import configure_logging
from ..services.story_generation import GenerationGateway
from .handlers import (
    DIALOGUE_KEY,
    GATEWAY_KEY,
    handle_text,
    on_error,
    start_command,
)

logger = logging.getLogger(__name__)


async def _on_startup(application: Application) -> None:
    logger.info("Bot is running...")


async def _on_shutdown(application: Application) -> None:
    sessions = application.bot_data[DIALOGUE_KEY].store
    logger.info(f"Bot stopped, discarding {len(sessions)} open session(s)")


def build_application(token: str, gateway: GenerationGateway | None = None) -> Application:
    """
    Build the Telegram application with dialogue state and handlers wired in.

    Args:
        token: Telegram bot token
        gateway: Generation services; defaults to the configured endpoints

    Returns:
        Application ready for polling
    """
    application = (
        Application.builder()
        .token(token)
        .post_init(_on_startup)
        .post_shutdown(_on_shutdown)
        .build()
    )

    application.bot_data[DIALOGUE_KEY] = DialogueStateMachine(SessionStore())
    application.bot_data[GATEWAY_KEY] = gateway or GenerationGateway()

    # Only new messages advance the dialogue; edits and channel posts are ignored.
    # /start must be registered before the catch-all text handler
    application.add_handler(
        CommandHandler("start", start_command, filters=filters.UpdateType.MESSAGE)
    )
    application.add_handler(
        MessageHandler(filters.UpdateType.MESSAGE & filters.TEXT, handle_text)
    )
    application.add_error_handler(on_error)

    return application


def main() -> None:
    """Configure logging and poll Telegram until SIGINT or SIGTERM."""
    configure_logging(json_format=LOG_JSON, level=LOG_LEVEL)
    application = build_application(get_bot_token())
    application.run_polling(stop_signals=(signal.SIGINT, signal.SIGTERM))


if __name__ == "__main__":
    main()
