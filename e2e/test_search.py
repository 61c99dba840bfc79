"""Site search."""

import pytest
from playwright.sync_api import expect

from sitecheck.browser_interaction.page_actions import search_input_or_skip, submit_search

pytestmark = pytest.mark.e2e

RESULTS_FILTER_TEXT = "Content Type Articles Press"


def test_search_returns_results_for_common_query(page):
    search_input = search_input_or_skip(page)
    submit_search(search_input, "Mars")

    results = page.get_by_role("group").filter(has_text=RESULTS_FILTER_TEXT)
    expect(results).not_to_have_count(0)


def test_empty_query_handled_gracefully(page, suite_config):
    search_input = search_input_or_skip(page)
    submit_search(search_input, "")

    expect(page).not_to_have_url(suite_config.base_url)
