import io

import pytest

from bucketlist.basepage import (
    LEAFLET_CSS,
    LEAFLET_JS,
    BasePage,
    Page,
    page_template,
    write_page_template,
)


class _CustomPage(BasePage):
    def title(self):
        return "Custom title"


def test_base_page_title_and_body():
    page = BasePage()
    assert page.title() == "This is a base title"
    assert page.body() == "This is a base body"


def test_page_is_abstract():
    with pytest.raises(TypeError):
        Page()


def test_template_frame():
    html = page_template(BasePage())
    assert html.startswith("\n<html>\n\t<head>\n\t\t<title>")
    assert html.endswith("This is a base body\n\t</body>\n</html>\n")
    assert "<title>This is a base title</title>" in html


def test_template_includes_leaflet_assets_in_order():
    html = page_template(BasePage())
    css_at = html.index(LEAFLET_CSS)
    js_at = html.index(LEAFLET_JS)
    body_at = html.index("This is a base body")
    assert css_at < js_at < body_at
    assert "<!-- Make sure you put this AFTER Leaflet's CSS -->" in html


def test_subclass_overrides_only_title():
    html = page_template(_CustomPage())
    assert "<title>Custom title</title>" in html
    assert "This is a base body" in html
    assert "This is a base title" not in html


def test_write_matches_render():
    stream = io.StringIO()
    page = _CustomPage()
    write_page_template(stream, page)
    assert stream.getvalue() == page_template(page)


def test_write_appends_to_stream():
    stream = io.StringIO()
    stream.write("prefix")
    write_page_template(stream, BasePage())
    assert stream.getvalue() == "prefix" + page_template(BasePage())