# tests/test_viewport.py

from __future__ import annotations

import pendulum
import pytest

from projectline.model.timeline import TimelineViewport
from projectline.service.viewport import scroll_to_today, zoom_in, zoom_out
from projectline.template.timeline import get_timeline_viewport_template


def _viewport(days: int, zoom: float, now: pendulum.DateTime) -> TimelineViewport:
    viewport = get_timeline_viewport_template(now)
    viewport["days_to_show"] = days
    viewport["zoom_level"] = zoom
    return viewport


def test_single_zoom_in_step(now: pendulum.DateTime) -> None:
    zoomed = zoom_in(_viewport(30, 1.0, now))

    assert zoomed["zoom_level"] == pytest.approx(1.2)
    assert zoomed["days_to_show"] == 25


def test_single_zoom_out_step(now: pendulum.DateTime) -> None:
    zoomed = zoom_out(_viewport(30, 1.0, now))

    assert zoomed["zoom_level"] == pytest.approx(1 / 1.2)
    assert zoomed["days_to_show"] == 36


def test_zoom_returns_new_viewport(now: pendulum.DateTime) -> None:
    viewport = _viewport(30, 1.0, now)
    zoom_in(viewport)

    assert viewport["days_to_show"] == 30
    assert viewport["zoom_level"] == 1.0


@pytest.mark.parametrize(
    ("days", "zoom"), [(30, 1.0), (90, 0.5), (7, 2.0), (45, 1.3), (8, 0.6)]
)
def test_repeated_zoom_in_clamps(days: int, zoom: float, now: pendulum.DateTime) -> None:
    viewport = _viewport(days, zoom, now)
    for _ in range(50):
        viewport = zoom_in(viewport)

    assert viewport["zoom_level"] == 2.0
    assert viewport["days_to_show"] == 7


@pytest.mark.parametrize(
    ("days", "zoom"), [(30, 1.0), (90, 0.5), (7, 2.0), (45, 1.3), (8, 0.6)]
)
def test_repeated_zoom_out_clamps(days: int, zoom: float, now: pendulum.DateTime) -> None:
    viewport = _viewport(days, zoom, now)
    for _ in range(50):
        viewport = zoom_out(viewport)

    assert viewport["zoom_level"] == 0.5
    assert viewport["days_to_show"] == 90


def test_days_to_show_stays_in_range_through_mixed_zooming(
    now: pendulum.DateTime,
) -> None:
    viewport = _viewport(30, 1.0, now)
    for step in range(40):
        viewport = zoom_in(viewport) if step % 3 else zoom_out(viewport)
        assert 7 <= viewport["days_to_show"] <= 90
        assert isinstance(viewport["days_to_show"], int)
        assert 0.5 <= viewport["zoom_level"] <= 2.0


def test_scroll_to_today(now: pendulum.DateTime) -> None:
    viewport = _viewport(21, 1.0, pendulum.datetime(2023, 6, 1))
    scrolled = scroll_to_today(viewport, now)

    assert scrolled["start"] == now
    assert scrolled["end"] == now.add(days=21)
    assert scrolled["days_to_show"] == 21
