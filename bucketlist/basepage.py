"""The HTML frame shared by every page."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TextIO

LEAFLET_CSS = "https://unpkg.com/leaflet@1.9.4/dist/leaflet.css"
LEAFLET_CSS_INTEGRITY = "sha256-p4NxAoJBhIIN+hmNHrzRCf9tD/miZyoHS5obTRR9BMY="
LEAFLET_JS = "https://unpkg.com/leaflet@1.9.4/dist/leaflet.js"
LEAFLET_JS_INTEGRITY = "sha256-20nQCchB9co0qIjJZRGuk2/Z9VM+kNiyxNV1lvTlZBo="


class Page(ABC):
    """A page that supplies a title and a body for the frame."""

    @abstractmethod
    def title(self) -> str:
        """Return the page title as HTML."""

    @abstractmethod
    def body(self) -> str:
        """Return the page body as HTML."""


class BasePage(Page):
    """Default page; subclasses override only what they need."""

    def title(self) -> str:
        return "This is a base title"

    def body(self) -> str:
        return "This is a base body"


def page_template(page: Page) -> str:
    """Render ``page`` inside the HTML frame."""
    return (
        "\n<html>\n\t<head>\n\t\t<title>"
        f"{page.title()}"
        "</title>\n\t</head>\n\t<body>\n"
        f'\t <link rel="stylesheet" href="{LEAFLET_CSS}"\n'
        f'     integrity="{LEAFLET_CSS_INTEGRITY}"\n'
        '     crossorigin=""/>\n'
        " <!-- Make sure you put this AFTER Leaflet's CSS -->\n"
        f' <script src="{LEAFLET_JS}"\n'
        f'     integrity="{LEAFLET_JS_INTEGRITY}"\n'
        '     crossorigin=""></script>\n'
        "\t\t"
        f"{page.body()}"
        "\n\t</body>\n</html>\n"
    )


def write_page_template(stream: TextIO, page: Page) -> None:
    """Write the rendered ``page`` to a text stream."""
    stream.write(page_template(page))