from playwright.sync_api import Page, Locator, Route, Error as PlaywrightError
from typing import Callable, List, Optional, Sequence
from urllib.parse import urljoin
import logging
import time

import pytest

logger = logging.getLogger(__name__)

SEARCH_INPUT_SELECTOR = 'input[type="search"], input[name="q"]'
NO_SEARCH_INPUT = "no visible search input found"


def first_visible(locator: Locator) -> Optional[Locator]:
    """Returns the first match of the locator that is visible, or None."""
    for i in range(locator.count()):
        candidate = locator.nth(i)
        if candidate.is_visible():
            return candidate
    return None


def find_search_input(page: Page) -> Optional[Locator]:
    return first_visible(page.locator(SEARCH_INPUT_SELECTOR))


def search_input_or_skip(page: Page) -> Locator:
    """Like find_search_input, but skips the calling test when there is none."""
    search_input = find_search_input(page)
    if search_input is None:
        pytest.skip(NO_SEARCH_INPUT)
    return search_input


def require(condition: bool, reason: str):
    """Skips the calling test unless an optional page feature is present."""
    if not condition:
        pytest.skip(reason)


def submit_search(search_input: Locator, query: str, wait_until: Optional[str] = "load"):
    """Types the query, presses Enter and waits for the resulting load state."""
    search_input.fill(query)
    search_input.press("Enter")
    if wait_until:
        search_input.page.wait_for_load_state(wait_until)


def try_click(locator: Locator, timeout_ms: Optional[float] = None, modifiers: Optional[List[str]] = None, force: bool = False) -> bool:
    """Best-effort click. Returns False instead of raising when the click fails.

    Used where a click may legitimately not apply: external links, links that
    open a new tab, elements covered by overlays.
    """
    kwargs = {}
    if timeout_ms is not None:
        kwargs["timeout"] = timeout_ms
    if modifiers:
        kwargs["modifiers"] = modifiers
    if force:
        kwargs["force"] = True
    try:
        locator.click(**kwargs)
        return True
    except PlaywrightError as e:
        logger.warning(f"Click not applied: {str(e).splitlines()[0]}")
        return False


def try_wait(page: Page, state: str = "load", timeout_ms: Optional[float] = None) -> bool:
    try:
        if timeout_ms is None:
            page.wait_for_load_state(state)
        else:
            page.wait_for_load_state(state, timeout=timeout_ms)
        return True
    except PlaywrightError as e:
        logger.warning(f"Load state '{state}' not reached: {str(e).splitlines()[0]}")
        return False


def try_goto(page: Page, url: str, wait_until: str = "load") -> bool:
    """Navigation whose failure is an expected outcome (missing pages, odd URLs)."""
    try:
        page.goto(url, wait_until=wait_until)
        return True
    except PlaywrightError as e:
        logger.warning(f"Navigation to {url} not completed: {str(e).splitlines()[0]}")
        return False


def try_history(page: Page, direction: str) -> bool:
    """Goes back or forward in history; a rejected move is logged, not raised."""
    move = page.go_back if direction == "back" else page.go_forward
    try:
        move()
        return True
    except PlaywrightError as e:
        logger.warning(f"History {direction} not completed: {str(e).splitlines()[0]}")
        return False


def delay_documents(delay_s: float, resource_types: Sequence[str] = ("document",)) -> Callable[[Route], None]:
    """Route handler that holds back page documents by delay_s and passes everything else through.

    Handlers of the sync API run on the test thread, so sleeping on every
    subresource would serialize the whole page load.
    """
    def handler(route: Route):
        if route.request.resource_type in resource_types:
            time.sleep(delay_s)
        route.continue_()

    return handler


def resolve_href(page: Page, href: str) -> str:
    return urljoin(page.url, href)


def fetch_status(page: Page, href: str) -> int:
    """GETs a linked resource through the session's own request context."""
    url = resolve_href(page, href)
    response = page.request.get(url)
    try:
        return response.status
    finally:
        response.dispose()
