"""Telegram command handlers."""

import logging

from telegram import Update
from telegram.ext import ContextTypes

from .adapters.json_schedule import ScheduleLoadError
from .config import load_config
from .core.display import category_label, item_heading, time_label
from .core.facets import Selection
from .core.query import browse, saved, session_info
from .refresh import UpNextBoard
from .telegram_format import items_markdown, saved_markdown, send_markdown, up_next_markdown
from .workflows import find_item, get_favorites, get_repository

logger = logging.getLogger(__name__)

HELP_TEXT = (
    "/now - What's happening now, up next, and coming soon\n"
    "/find <text> - Search the schedule\n"
    "/saved - Your saved items\n"
    "/save <id> - Save or unsave an item\n"
    "/show <id> - Item details\n"
    "/help - Show all commands"
)


async def start_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Handle /start command."""
    await update.message.reply_text("Hey! I'm your fair schedule guide.\n\nCommands:\n" + HELP_TEXT)


async def help_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Handle /help command."""
    await update.message.reply_text("Fair Schedule Commands\n\n" + HELP_TEXT)


async def now_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Handle /now command - show the happening-now board."""
    board: UpNextBoard = context.bot_data["board"]

    # A simulated clock is only classified on request
    result = board.latest
    if result is None or board.is_simulated:
        try:
            result = board.refresh()
        except ScheduleLoadError as e:
            logger.error(f"Failed to load schedule for /now: {e}")
            await update.message.reply_text(f"Schedule unavailable: {e}")
            return

    await send_markdown(update.message, up_next_markdown(result, board.is_simulated))


async def find_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Handle /find <text> - free-text search across the schedule."""
    query = " ".join(context.args or []).strip()
    if not query:
        await update.message.reply_text("Usage: /find <text>, e.g. /find market hogs")
        return

    config = load_config()
    try:
        items = get_repository(config).fetch_items()
    except ScheduleLoadError as e:
        await update.message.reply_text(f"Schedule unavailable: {e}")
        return

    result = browse(items, Selection(), query)
    if not result.items:
        await update.message.reply_text("No results.")
        return

    await send_markdown(update.message, items_markdown(result.items))


async def saved_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Handle /saved - the user's saved items by day."""
    config = load_config()
    try:
        items = get_repository(config).fetch_items()
    except ScheduleLoadError as e:
        await update.message.reply_text(f"Schedule unavailable: {e}")
        return

    favorites = get_favorites(config, update.effective_user.id).load()
    await send_markdown(update.message, saved_markdown(saved(items, favorites)))


async def save_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Handle /save <id> - toggle an item in the user's schedule."""
    if not context.args:
        await update.message.reply_text("Usage: /save <id>")
        return

    item_id = context.args[0]
    config = load_config()
    try:
        items = get_repository(config).fetch_items()
    except ScheduleLoadError as e:
        await update.message.reply_text(f"Schedule unavailable: {e}")
        return

    item = find_item(items, item_id)
    if item is None:
        await update.message.reply_text(f"No schedule item with id {item_id}")
        return

    favorites = get_favorites(config, update.effective_user.id).toggle(item_id)
    verb = "Saved" if item_id in favorites else "Removed"
    await update.message.reply_text(f"{verb}: {item_heading(item)}")


async def show_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Handle /show <id> - item details."""
    if not context.args:
        await update.message.reply_text("Usage: /show <id>")
        return

    config = load_config()
    try:
        items = get_repository(config).fetch_items()
    except ScheduleLoadError as e:
        await update.message.reply_text(f"Schedule unavailable: {e}")
        return

    item = find_item(items, context.args[0])
    if item is None:
        await update.message.reply_text(f"No schedule item with id {context.args[0]}")
        return

    lines = [
        f"**{item_heading(item)}**",
        f"Day: {item.day}",
        f"{time_label(item)}: {item.time or 'TBD'}",
        f"Location: {item.location}",
    ]
    category = category_label(item)
    if category:
        lines.append(f"Division: {category}")
    if item.order is not None:
        lines.append(session_info(items, item).format())
    if item.description:
        lines.append("")
        lines.append(item.description)

    await send_markdown(update.message, "\n".join(lines))
