"""Shared fixtures."""

import pytest

from fairgoer.core.items import ClassDetails, ItemKind, ScheduleItem


@pytest.fixture
def make_item():
    """Factory for creating schedule items."""
    counter = {"n": 0}

    def _make(
        title: str = "Item",
        day: str = "Tuesday",
        time: str | None = None,
        location: str = "Show Arena",
        kind: ItemKind = ItemKind.CLASS,
        division: str | None = "Beef",
        divisions: str | None = None,
        order: int | None = None,
        group: str | None = None,
        subgroup: str | None = None,
        subsubgroup: str | None = None,
        number: str | None = None,
        session_id: str | None = None,
        id: str | None = None,
        **extra,
    ) -> ScheduleItem:
        counter["n"] += 1
        details = None
        if kind is ItemKind.CLASS:
            details = ClassDetails(number=number, group=group, subgroup=subgroup, subsubgroup=subsubgroup)
        return ScheduleItem(
            id=id or str(counter["n"]),
            kind=kind,
            title=title,
            day=day,
            location=location,
            division=division,
            divisions=divisions,
            time=time,
            order=order,
            details=details,
            session_id=session_id,
            **extra,
        )

    return _make
