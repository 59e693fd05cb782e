"""The main page listing every place with a map and its visited state."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from decimal import Decimal

from bucketlist.basepage import BasePage
from bucketlist.database import Bucket

TILE_URL = "https://tile.openstreetmap.org/{z}/{x}/{y}.png"
TILE_ATTRIBUTION = (
    "&copy; <a href=\"https://www.openstreetmap.org/copyright\">"
    "OpenStreetMap</a> contributors"
)

_ESCAPES = str.maketrans(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
        "'": "&#39;",
    }
)


def _escape(text: str) -> str:
    """Escape text for use in HTML."""
    return text.translate(_ESCAPES)


def _format_float(value: float) -> str:
    """Shortest decimal form of ``value`` without an exponent."""
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


@dataclass
class MainPage(BasePage):
    """The page showing the bucket list to a visitor."""

    data: Sequence[Bucket] = field(default_factory=list)
    username: str = ""
    remote_ip: str = ""
    user_agent: str = ""

    def title(self) -> str:
        return "\n\tThis is the main page\n"

    def body(self) -> str:
        return (
            "\n\t<h1>Main page</h1>\n\t<div>\n\t\tClick links below:\n"
            '\t<table style="width:100%">\n\t'
            f"{emit_rows(self.data, self.username)}"
            "\n\t</table>\n\t</div>\n\t<div>\n\t\tSome info about you:<br/>\n"
            f"\t\tIP: <b>{_escape(self.remote_ip)}</b><br/>\n"
            f"\t\tUser-Agent: <b>{_escape(self.user_agent)}</b><br/>\n"
            "\t</div>\n"
        )


def _emit_row(index: int, row: Bucket, username: str) -> str:
    background = "white" if index & 1 else "#ddd"
    if username != "admin":
        cells = (
            "\n\t\t\t"
            f'<td style="width:20%;">{_escape(row.placename)}</td> \n\t\t\t'
            '<td style="height:360px; vertical-align:bottom; width:60%;" '
            f'id="map{row.number}">'
            f"{draw_map(row.longitude, row.latitude, row.number, row.placename)}"
            "</td>\n\t\t\t"
            '<td style="vertical-align:bottom; width:20%;">'
            f"{draw_button(row.visited)}</td>\n\t\t\t"
        )
    else:
        cells = (
            "\n\t\t\t<td></td>\n\t\t\t<td></td>\n\t\t\t"
            '<td><button onclick="myFunction()">Click me!</button></td>\n\t\t\t'
        )
    return (
        f'\n\t\t<tr style="background: {background}">\n\t\t\t'
        "\n\t\t\t"
        f"{cells}"
        "\n\t\t</tr>\n\t"
    )


def emit_rows(rows: Sequence[Bucket], username: str) -> str:
    """Render the table header and one row per place."""
    header = (
        "\n\t<tr>\n\t\t"
        "\n\t\t<th>Name</th>\n\t\t<th>Map</th>\n\t\t<th>Visited</th>\n\t</tr>\n\n\t"
    )
    body = "".join(_emit_row(index, row, username) for index, row in enumerate(rows))
    return header + body + "\n"


def draw_map(lat: float, long: float, item_id: int, name: str) -> str:
    """Render the script that draws a map with a marker for one place."""
    first = _format_float(long)
    second = _format_float(lat)
    return (
        "\n<script >\n"
        f"var map = L.map('map{item_id}', {{\n"
        f"    center: [{first}, {second}],\n"
        "    zoom: 13});\n\n"
        f"L.tileLayer('{TILE_URL}', {{\n"
        f"    attribution: '{TILE_ATTRIBUTION}'\n"
        "}).addTo(map);\n\n"
        f"L.marker([{first},{second}]).addTo(map)\n"
        f"    .bindPopup('{_escape(name)}')\n"
        "    .openPopup();\n</script>\n"
    )


def draw_button(check: bool) -> str:
    """Render a disabled checkbox showing whether a place was visited."""
    if check:
        inner = '\n   <input type="checkbox" checked disabled >\n   '
    else:
        inner = '\n\t<input type="checkbox" disabled >\n\t'
    return "\n\n   " + inner + "\n"