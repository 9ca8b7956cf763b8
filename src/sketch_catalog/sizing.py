"""Canvas size inference from p5.js source.

This is a text heuristic, not a parser: the first ``createCanvas(w, h)``
call found wins, scanning tabs in order. Sketch code is arbitrary user
input and is never executed or validated.
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from typing import Any, Iterable

from sketch_catalog.model.sketch import UNKNOWN_DIMENSIONS, Dimensions

CREATE_CANVAS_RE = re.compile(
    r"createCanvas\(\s*(\w+),\s*(\w+)\s*(?:,\s*(?:P2D|WEBGL)\s*)?\)",
    re.MULTILINE | re.ASCII,
)

# Leading numeric prefix as accepted by JavaScript's parseFloat.
_FLOAT_PREFIX_RE = re.compile(r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)", re.ASCII)

_WINDOW_SIZE = ("windowWidth", "windowHeight")


def parse_float_prefix(text: str) -> float:
    """Parse the longest numeric prefix of *text*; NaN when there is none."""
    m = _FLOAT_PREFIX_RE.match(text.lstrip())
    if not m:
        return math.nan
    return float(m.group(0).replace("Infinity", "inf"))


def _truthy(value: float) -> bool:
    return value != 0 and not math.isnan(value)


def infer_canvas_size(tabs: Iterable[Any]) -> Dimensions:
    """Return the canvas size declared in the first usable tab.

    A ``createCanvas(windowWidth, windowHeight)`` match short-circuits to
    unknown dimensions. Matches whose arguments are zero or non-numeric
    identifiers are skipped in favour of later tabs.
    """
    for tab in tabs:
        code = tab.get("code") if isinstance(tab, Mapping) else None
        if not code or not isinstance(code, str):
            continue
        m = CREATE_CANVAS_RE.search(code)
        if not m:
            continue
        if (m.group(1), m.group(2)) == _WINDOW_SIZE:
            return UNKNOWN_DIMENSIONS
        width = parse_float_prefix(m.group(1))
        height = parse_float_prefix(m.group(2))
        if _truthy(width) and _truthy(height):
            return Dimensions(width=width, height=height)
    return UNKNOWN_DIMENSIONS
