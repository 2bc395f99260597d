"""fairgoer CLI - fair schedule browser."""

import json
import logging
import sys
from dataclasses import replace

import click

from .adapters.json_schedule import ScheduleLoadError
from .config import Config, load_config
from .core.clock import WallClock
from .core.display import (
    category_label,
    format_civil_time,
    format_item_line,
    format_up_next_line,
    item_heading,
    time_label,
)
from .core.facets import ALL, Selection
from .core.items import ScheduleItem
from .core.query import UpNextResult, session_info
from .refresh import UpNextBoard, schedule_refresh
from .workflows import find_item, get_favorites, get_repository, run_browse, run_saved


@click.group()
@click.version_option()
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool):
    """fairgoer - fair schedule browser."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )


def _fail(message: str) -> None:
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


def _load_items(config: Config) -> list[ScheduleItem]:
    try:
        return get_repository(config).fetch_items()
    except ScheduleLoadError as e:
        _fail(str(e))


def _item_json(item: ScheduleItem) -> dict:
    return {
        "id": item.id,
        "kind": item.kind.value,
        "title": item.title,
        "day": item.day,
        "time": item.time,
        "estimated": item.is_estimated,
        "location": item.location,
        "order": item.order,
        "divisions": sorted(item.division_set),
        "class_number": item.class_number,
        "class_group": item.class_group,
        "class_subgroup": item.class_subgroup,
        "class_subsubgroup": item.class_subsubgroup,
        "event_type": item.event_type,
    }


def _show_up_next(result: UpNextResult, config: Config, simulated: bool, as_json: bool) -> None:
    if as_json:
        click.echo(
            json.dumps(
                {
                    "minutes": result.now.minutes,
                    "day": result.now.day,
                    "items": [
                        {
                            **_item_json(entry.item),
                            "status": entry.status.value,
                            "minutes_until": entry.minutes_until,
                        }
                        for entry in result.items
                    ],
                },
                indent=2,
            )
        )
        return

    suffix = "(Test)" if simulated else config.timezone
    click.echo(f"{format_civil_time(result.now)} {suffix}\n")

    if not result.items:
        click.echo("No events right now.")
        if simulated:
            click.echo("Try a different time to see events!")
        else:
            click.echo("Check back during fair hours to see what's happening!")
        return

    for entry in result.items:
        click.echo(format_up_next_line(entry))


@main.command()
@click.option("--at", "at_time", default=None, help='Simulate a fair wall-clock time, e.g. "2:00 PM"')
@click.option("--day", default=None, help="Simulated fair day (requires --at)")
@click.option("--watch", is_flag=True, help="Keep refreshing every minute")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def now(at_time: str | None, day: str | None, watch: bool, as_json: bool):
    """Show what's happening now, up next, and coming soon."""
    config = load_config()
    if day and not at_time:
        _fail("--day needs --at (a simulated time)")
    if at_time:
        try:
            WallClock.parse(at_time)
        except ValueError as e:
            _fail(str(e))
        config = replace(config, test_time=at_time, test_day=day or "")

    board = UpNextBoard(get_repository(config), config)
    try:
        result = board.refresh()
    except ScheduleLoadError as e:
        _fail(str(e))
    _show_up_next(result, config, board.is_simulated, as_json)

    if not watch:
        return

    from apscheduler.schedulers.blocking import BlockingScheduler

    scheduler = BlockingScheduler(timezone=config.timezone)

    def show(latest: UpNextResult):
        click.echo()
        _show_up_next(latest, config, board.is_simulated, as_json)

    if schedule_refresh(scheduler, board, config.refresh_seconds, on_refresh=show) is None:
        click.echo("\nTest time is fixed - nothing to watch.")
        return

    click.echo("\nPress Ctrl+C to stop")
    try:
        scheduler.start()
    except (KeyboardInterrupt, SystemExit):
        pass


def _facet_options(f):
    f = click.option("--division", default=ALL, help="Division")(f)
    f = click.option("--group", "class_group", default=ALL, help="Class group, Events, or Exhibitor Reminders")(f)
    f = click.option("--subgroup", "class_subgroup", default=ALL, help="Class subgroup")(f)
    f = click.option("--subsubgroup", "class_subsubgroup", default=ALL, help="Class sub-subgroup")(f)
    f = click.option("--day", default=ALL, help="Fair day")(f)
    f = click.option("--search", "-s", default="", help="Search title, class number, location...")(f)
    return f


def _selection(division, class_group, class_subgroup, class_subsubgroup, day) -> Selection:
    """Apply options coarse-to-fine, the way a user would tap them."""
    return (
        Selection()
        .with_division(division)
        .with_class_group(class_group)
        .with_class_subgroup(class_subgroup)
        .with_class_subsubgroup(class_subsubgroup)
        .with_day(day)
    )


@main.command("browse")
@_facet_options
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def browse_cmd(division, class_group, class_subgroup, class_subsubgroup, day, search, as_json):
    """Browse the schedule with cascading filters."""
    config = load_config()
    selection = _selection(division, class_group, class_subgroup, class_subsubgroup, day)
    try:
        result = run_browse(config, selection, search)
    except ScheduleLoadError as e:
        _fail(str(e))

    if result.selection != selection:
        click.echo("Note: some filters no longer apply and were reset to All.", err=True)

    if as_json:
        click.echo(json.dumps([_item_json(i) for i in result.items], indent=2))
        return

    if not result.items:
        click.echo("No results.")
        return

    favorites = get_favorites(config).load()
    for item in result.items:
        marker = "★" if item.id in favorites else " "
        click.echo(f"{marker} [{item.id}] {format_item_line(item)}")


@main.command()
@_facet_options
def facets(division, class_group, class_subgroup, class_subsubgroup, day, search):
    """Show the filter options available for a selection."""
    config = load_config()
    selection = _selection(division, class_group, class_subgroup, class_subsubgroup, day)
    try:
        result = run_browse(config, selection, search)
    except ScheduleLoadError as e:
        _fail(str(e))

    for row in result.facets.rows:
        if not row.visible:
            continue
        options = ", ".join(f"*{o}*" if o == row.selected else o for o in row.options)
        click.echo(f"{row.name:18} {options}")
    click.echo(f"\n{len(result.items)} matching items")


@main.command("saved")
def saved_cmd():
    """List saved items by day."""
    config = load_config()
    try:
        sections = run_saved(config)
    except ScheduleLoadError as e:
        _fail(str(e))

    if not sections:
        click.echo('No saved items yet. Use "fairgoer save ID" on any entry.')
        return

    for i, (day, items) in enumerate(sections):
        if i:
            click.echo()
        click.echo(f"### {day}")
        for item in items:
            click.echo(f"  [{item.id}] {format_item_line(item)}")


def _toggle(item_id: str, want_saved: bool) -> None:
    config = load_config()
    items = _load_items(config)
    item = find_item(items, item_id)
    if item is None:
        _fail(f"No schedule item with id {item_id}")

    store = get_favorites(config)
    if (item_id in store.load()) != want_saved:
        store.toggle(item_id)
    verb = "Saved" if want_saved else "Removed"
    click.echo(f"{verb}: {item_heading(item)}")


@main.command()
@click.argument("item_id")
def save(item_id: str):
    """Add an item to My Schedule."""
    _toggle(item_id, want_saved=True)


@main.command()
@click.argument("item_id")
def unsave(item_id: str):
    """Remove an item from My Schedule."""
    _toggle(item_id, want_saved=False)


@main.command()
@click.argument("item_id")
def show(item_id: str):
    """Show details for one item."""
    config = load_config()
    items = _load_items(config)
    item = find_item(items, item_id)
    if item is None:
        _fail(f"No schedule item with id {item_id}")

    click.echo(item_heading(item))
    click.echo(f"  Day: {item.day}")
    click.echo(f"  {time_label(item)}: {item.time or 'TBD'}")
    click.echo(f"  Location: {item.location}")
    category = category_label(item)
    if category:
        click.echo(f"  Division: {category}")
    if item.order is not None:
        click.echo(f"  {session_info(items, item).format()}")
    if item.description:
        click.echo(f"\n{item.description}")
    saved = item.id in get_favorites(config).load()
    click.echo(f"\n{'★ In My Schedule' if saved else '☆ Not saved'}")


@main.command()
@click.option("--debug", is_flag=True, help="Enable debug logging")
def bot(debug: bool):
    """Run the Telegram bot."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )

    try:
        from .telegram_bot import run_bot
        click.echo("Starting fairgoer Telegram bot...")
        click.echo("Press Ctrl+C to stop")
        run_bot()
    except ImportError as e:
        click.echo("Error: Missing dependencies. Run 'pip install python-telegram-bot apscheduler'", err=True)
        click.echo(f"Details: {e}", err=True)
        sys.exit(1)
    except ValueError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
