"""fairgoer Telegram Bot."""

import logging

from telegram import Update
from telegram.ext import Application, CommandHandler, MessageHandler, filters
from apscheduler.schedulers.asyncio import AsyncIOScheduler

from .config import Config, load_config
from .refresh import UpNextBoard, schedule_refresh
from .telegram_handlers import (
    start_handler,
    help_handler,
    now_handler,
    find_handler,
    saved_handler,
    save_handler,
    show_handler,
)
from .workflows import get_repository

logger = logging.getLogger(__name__)


class AuthFilter(filters.BaseFilter):
    """Filter to only allow authorized users."""

    def __init__(self, allowed_users: list[int]):
        super().__init__()
        self.allowed_users = allowed_users

    def check_update(self, update: Update) -> bool:
        if not self.allowed_users:
            return True  # No restriction if no users configured
        user = update.effective_user
        if user is None:
            return False
        return user.id in self.allowed_users


def create_application(config: Config | None = None) -> Application:
    """Create and configure the Telegram bot application."""
    if config is None:
        config = load_config()

    if not config.telegram_bot_token:
        raise ValueError(
            "TELEGRAM_BOT_TOKEN not configured. "
            "Get a token from @BotFather on Telegram and add it to fairgoer.conf"
        )

    app = Application.builder().token(config.telegram_bot_token).build()
    app.bot_data["board"] = UpNextBoard(get_repository(config), config)

    auth_filter = AuthFilter(config.telegram_allowed_users)

    app.add_handler(CommandHandler("start", start_handler, filters=auth_filter))
    app.add_handler(CommandHandler("help", help_handler, filters=auth_filter))
    app.add_handler(CommandHandler("now", now_handler, filters=auth_filter))
    app.add_handler(CommandHandler("find", find_handler, filters=auth_filter))
    app.add_handler(CommandHandler("saved", saved_handler, filters=auth_filter))
    app.add_handler(CommandHandler("save", save_handler, filters=auth_filter))
    app.add_handler(CommandHandler("show", show_handler, filters=auth_filter))

    # Handle unauthorized access attempts
    async def unauthorized_handler(update: Update, context):
        user = update.effective_user
        logger.warning(f"Unauthorized access attempt from user {user.id} ({user.username})")
        await update.message.reply_text(
            "Unauthorized. This bot is private.\n"
            "If you're the owner, add your Telegram user ID to TELEGRAM_ALLOWED_USERS in fairgoer.conf"
        )

    if config.telegram_allowed_users:
        app.add_handler(MessageHandler(~auth_filter & filters.ALL, unauthorized_handler))

    return app


def setup_scheduler(app: Application, config: Config | None = None) -> AsyncIOScheduler:
    """Set up the periodic happening-now refresh."""
    if config is None:
        config = load_config()

    scheduler = AsyncIOScheduler(timezone=config.timezone)
    schedule_refresh(scheduler, app.bot_data["board"], config.refresh_seconds)
    return scheduler


def run_bot():
    """Run the Telegram bot."""
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.INFO,
    )

    config = load_config()
    app = create_application(config)
    scheduler = setup_scheduler(app, config)

    async def post_init(application: Application) -> None:
        """Start scheduler after event loop is running."""
        scheduler.start()
        logger.info("Scheduler started")

    app.post_init = post_init

    if config.telegram_allowed_users:
        logger.info(f"Bot authorized for users: {config.telegram_allowed_users}")
    else:
        logger.warning("No TELEGRAM_ALLOWED_USERS configured - bot is open to anyone!")

    logger.info("Starting fairgoer Telegram bot...")

    app.run_polling(allowed_updates=Update.ALL_TYPES)
