import pytest

pytestmark = pytest.mark.e2e


def test_homepage_has_expected_title(page, suite_config):
    assert page.title() == suite_config.expected_title
