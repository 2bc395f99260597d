"""Telegram message formatting utilities."""

import telegramify_markdown

from .core.display import format_civil_time, format_item_line, format_up_next_line
from .core.items import ScheduleItem
from .core.query import UpNextResult


async def send_markdown(bot_or_msg, text: str, *, chat_id: int | None = None):
    """Send markdown text to Telegram, converting to MarkdownV2.

    bot_or_msg: a Bot instance (pass chat_id) or an Update.message (calls reply_text).
    """
    converted = telegramify_markdown.markdownify(text)
    chunks = [converted[i : i + 4000] for i in range(0, len(converted), 4000)]
    for chunk in chunks:
        if chat_id is not None:
            await bot_or_msg.send_message(chat_id=chat_id, text=chunk, parse_mode="MarkdownV2")
        else:
            await bot_or_msg.reply_text(chunk, parse_mode="MarkdownV2")


def up_next_markdown(result: UpNextResult, simulated: bool = False) -> str:
    header = f"**{format_civil_time(result.now)}**" + (" (Test)" if simulated else "")
    if not result.items:
        return f"{header}\n\nNo events right now."
    lines = [f"- {format_up_next_line(entry)}" for entry in result.items]
    return header + "\n\n" + "\n".join(lines)


def items_markdown(items: list[ScheduleItem], limit: int = 25) -> str:
    """Bulleted item list, truncated to `limit` entries."""
    lines = [f"- `{item.id}` {format_item_line(item)}" for item in items[:limit]]
    if len(items) > limit:
        lines.append(f"...and {len(items) - limit} more")
    return "\n".join(lines)


def saved_markdown(sections: list[tuple[str, list[ScheduleItem]]]) -> str:
    if not sections:
        return "No saved items yet. Use /save <id> on any entry."
    blocks = [f"**{day}**\n{items_markdown(items, limit=len(items))}" for day, items in sections]
    return "\n\n".join(blocks)
