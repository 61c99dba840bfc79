import pytest
from PIL import Image

from sitecheck.observation.accessibility import AccessibilityScanner, parse_violations
from sitecheck.observation.dom_probe import DOMProbe
from sitecheck.observation.visual_capture import VisualCapture
from sitecheck.shared.errors import AxeUnavailable


def test_parse_violations():
    results = {
        "violations": [
            {
                "id": "image-alt",
                "impact": "critical",
                "description": "Images must have alternate text",
                "helpUrl": "https://dequeuniversity.com/rules/axe/4.9/image-alt",
                "nodes": [{}, {}],
            },
            {"id": "region", "impact": None, "nodes": []},
        ]
    }

    violations = parse_violations(results)

    assert [v.id for v in violations] == ["image-alt", "region"]
    assert violations[0].node_count == 2
    assert violations[0].help_url.endswith("image-alt")
    assert violations[1].impact is None


def test_parse_violations_empty():
    assert parse_violations({}) == []


@pytest.mark.browser
def test_visual_capture(manager):
    with manager.open() as session:
        image = VisualCapture(session.page).capture()
        assert isinstance(image, Image.Image)
        assert image.size == (manager.config.viewport_width, manager.config.viewport_height)


@pytest.mark.browser
def test_dom_probe_layout(manager):
    with manager.open() as session:
        probe = DOMProbe(session.page)
        assert "Footer text" in probe.body_text()
        assert probe.inner_width() == manager.config.viewport_width
        assert probe.body_font_size() == 16
        assert probe.has_horizontal_overflow() is False
        assert probe.scroll_width() <= manager.config.viewport_width


@pytest.mark.browser
def test_dom_probe_focus_and_zoom(manager):
    with manager.open() as session:
        page = session.page
        probe = DOMProbe(page)
        assert probe.active_tag() == "BODY"
        page.keyboard.press("Tab")
        assert probe.active_tag() == "A"

        probe.set_zoom(200)
        assert page.evaluate("() => document.body.style.zoom") == "200%"


@pytest.mark.browser
def test_dom_probe_media_and_images(manager):
    with manager.open() as session:
        page = session.page
        probe = DOMProbe(page)
        assert probe.mute_all_videos() == 1

        state = DOMProbe.media_state(page.locator("#clip"))
        assert state["muted"] is True
        assert state["paused"] is True

        page.wait_for_function("() => document.getElementById('pixel').complete")
        geometry = DOMProbe.image_geometry(page.locator("#pixel"))
        assert geometry == {"width": 10, "height": 10, "naturalWidth": 1, "naturalHeight": 1}


@pytest.mark.browser
def test_scanner_reports_unloadable_axe(manager):
    with manager.open() as session:
        scanner = AccessibilityScanner(session.page, manager.config.base_url + "no-such-axe.js")
        with pytest.raises(AxeUnavailable):
            scanner.scan()
