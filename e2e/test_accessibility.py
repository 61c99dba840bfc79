"""Accessibility: axe-core audit and keyboard reachability."""

import json

import pytest

from sitecheck.evaluation.checks import critical_violations
from sitecheck.observation.accessibility import AccessibilityScanner
from sitecheck.observation.dom_probe import DOMProbe
from sitecheck.shared.errors import AxeUnavailable

pytestmark = pytest.mark.e2e


def test_homepage_has_no_critical_axe_violations(page, suite_config):
    scanner = AccessibilityScanner(page, suite_config.axe_script_url)
    try:
        violations = scanner.scan()
    except AxeUnavailable as e:
        pytest.skip(str(e))

    critical = critical_violations(violations)
    assert not critical, "Critical a11y violations:\n" + json.dumps(
        [v.model_dump() for v in critical], indent=2
    )


def test_keyboard_navigation_moves_focus(page):
    page.keyboard.press("Tab")
    page.keyboard.press("Tab")

    assert DOMProbe(page).has_active_element()
