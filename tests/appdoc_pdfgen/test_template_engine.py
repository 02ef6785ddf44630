from datetime import date
from decimal import Decimal

import pytest

from appdoc import config
from appdoc.error import RenderError
from appdoc.generator import build_view
from appdoc.pdfgen import Jinja2TemplateRenderer, jinja2renderer
from appdoc.pdfgen.engine import default_data, format_date, format_money


def test_filters():
    assert default_data(None) == ""
    assert default_data(0) == 0
    assert format_date(date(2024, 3, 5)) == "05 March 2024"
    assert format_date("2024-03-05") == "05 March 2024"
    assert format_date(None) == ""
    assert format_money(Decimal("1234.5")) == "1,234.50"
    assert format_money(None) == ""


def test_render_activated_template(activated_application):
    _, view = build_view(activated_application, config)
    html = jinja2renderer.generate_from_path(
        f"{config.TEMPLATE_DIR}{config.TEMPLATE_PATHS['ActivatedApplication']}", view
    )

    assert activated_application.reference_number in html
    assert "Thandi Mokoena" in html
    assert "Mokoena Holdings (Pty) Ltd" in html
    assert "Balanced Fund" in html
    assert "15 March 2024" in html


def test_render_in_review_template(in_review_application):
    _, view = build_view(in_review_application, config)
    html = jinja2renderer.generate_from_path(
        f"{config.TEMPLATE_DIR}{config.TEMPLATE_PATHS['InReviewApplication']}", view
    )

    assert "address verification for FICA purposes" in html
    assert "In Review" in html


def test_render_pending_template(pending_application):
    _, view = build_view(pending_application, config)
    html = jinja2renderer.generate_from_path(
        f"{config.TEMPLATE_DIR}{config.TEMPLATE_PATHS['PendingApplication']}", view
    )

    assert "awaiting processing" in html
    assert "Portfolio" not in html


def test_values_are_escaped(tmp_path):
    (tmp_path / "note.html").write_text("<p>{{ note }}</p>")
    renderer = Jinja2TemplateRenderer()

    html = renderer.generate_from_path(str(tmp_path / "note.html"), {"note": "<b>x</b>"})
    assert html == "<p>&lt;b&gt;x&lt;/b&gt;</p>"


def test_filters_and_globals_reach_new_environments(tmp_path):
    (tmp_path / "greet.html").write_text("{{ GREETING }} {{ name | shout }}")
    renderer = Jinja2TemplateRenderer()
    renderer.add_filter("shout", str.upper)
    renderer.add_global("GREETING", "Hello")

    assert renderer.render("greet.html", {"name": "ada"}, searchpath=str(tmp_path)) == "Hello ADA"


def test_missing_template_raises(tmp_path):
    renderer = Jinja2TemplateRenderer(str(tmp_path))

    with pytest.raises(RenderError) as excinfo:
        renderer.render("missing.html", {})

    assert excinfo.value.status_code == 500


def test_error_page(tmp_path, monkeypatch):
    from appdoc.pdfgen import engine

    monkeypatch.setitem(engine.config.__values__, "RENDER_ERROR_PAGE", True)
    (tmp_path / "broken.html").write_text("{{ value.missing.attr }}")

    html = Jinja2TemplateRenderer().generate_from_path(str(tmp_path / "broken.html"), {"value": None})
    assert "Cannot render document" in html
    assert "broken.html" in html
