# SPDX-License-Identifier: MIT

import math
from typing import Optional

import pendulum

from projectline.model.timeline import TimelineViewport
from projectline.query.span import clamp_days_to_show
from projectline.time import now_utc

ZOOM_STEP = 1.2
MIN_ZOOM_LEVEL = 0.5
MAX_ZOOM_LEVEL = 2.0


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def zoom_in(viewport: TimelineViewport) -> TimelineViewport:
    zoomed = viewport.copy()
    zoomed["zoom_level"] = min(viewport["zoom_level"] * ZOOM_STEP, MAX_ZOOM_LEVEL)
    zoomed["days_to_show"] = clamp_days_to_show(
        _round_half_up(viewport["days_to_show"] / ZOOM_STEP)
    )
    return zoomed


def zoom_out(viewport: TimelineViewport) -> TimelineViewport:
    zoomed = viewport.copy()
    zoomed["zoom_level"] = max(viewport["zoom_level"] / ZOOM_STEP, MIN_ZOOM_LEVEL)
    zoomed["days_to_show"] = clamp_days_to_show(
        _round_half_up(viewport["days_to_show"] * ZOOM_STEP)
    )
    return zoomed


def scroll_to_today(
    viewport: TimelineViewport, now: Optional[pendulum.DateTime] = None
) -> TimelineViewport:
    if now is None:
        now = now_utc()
    scrolled = viewport.copy()
    scrolled["start"] = now
    scrolled["end"] = now.add(days=viewport["days_to_show"])
    return scrolled
