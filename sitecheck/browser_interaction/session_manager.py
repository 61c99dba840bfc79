from contextlib import contextmanager
from enum import Enum
from typing import Iterator, List, Optional
from urllib.parse import urljoin
import logging
import uuid

from playwright.sync_api import (
    sync_playwright,
    Browser,
    BrowserContext,
    ConsoleMessage,
    Error as PlaywrightError,
    Page,
    Playwright,
)

from sitecheck.shared.errors import NavigationError, SessionClosedError
from sitecheck.utils.config import SuiteConfig

logger = logging.getLogger(__name__)

ROOT_PATH = "./"


class SessionState(Enum):
    OPEN = "open"
    NAVIGATED = "navigated"
    CLOSED = "closed"


class SiteSession:
    """One isolated browsing context (cookies, storage, cache) and its page."""

    def __init__(self, context: BrowserContext, base_url: str):
        self.session_id = uuid.uuid4().hex
        self.base_url = base_url
        self.context = context
        self.page: Page = context.new_page()
        self.state = SessionState.OPEN
        self.console_errors: List[str] = []
        self.page_errors: List[str] = []
        self.page.on("console", self._on_console)
        self.page.on("pageerror", self._on_page_error)

    def _on_console(self, message: ConsoleMessage):
        if message.type == "error":
            self.console_errors.append(message.text)

    def _on_page_error(self, error):
        self.page_errors.append(str(error))

    def navigate(self, path: str = ROOT_PATH, wait_until: Optional[str] = None):
        """Navigates relative to the base URL. Failures are raised, never retried."""
        if self.state is SessionState.CLOSED:
            raise SessionClosedError(f"Session {self.session_id} is closed")

        target = urljoin(self.base_url, path)
        try:
            if wait_until:
                self.page.goto(path, wait_until=wait_until)
            else:
                self.page.goto(path)
        except PlaywrightError as e:
            reason = str(e).split("\n")[0]
            logger.error(f"Session {self.session_id}: navigation to {target} failed: {reason}")
            raise NavigationError(target, reason) from e

        self.state = SessionState.NAVIGATED
        logger.info(f"Session {self.session_id}: navigated to {target}")

    @property
    def closed(self) -> bool:
        return self.state is SessionState.CLOSED

    def close(self):
        """Closes the context and frees its storage. Safe to call more than once."""
        if self.state is SessionState.CLOSED:
            return
        self.state = SessionState.CLOSED
        self.context.close()
        logger.info(f"Session {self.session_id}: closed")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


class SessionManager:
    """Owns the browser process and hands out one fresh SiteSession per test.

    The browser is either launched by start() or supplied by the caller; a
    supplied browser is never closed here.
    """

    def __init__(self, config: Optional[SuiteConfig] = None, browser: Optional[Browser] = None):
        self.config = config or SuiteConfig()
        self.playwright: Optional[Playwright] = None
        self.browser: Optional[Browser] = browser
        self._owns_browser = browser is None

    def start(self) -> Browser:
        """Launches the configured browser, once."""
        if self.browser:
            return self.browser

        self.playwright = sync_playwright().start()
        launcher = getattr(self.playwright, self.config.browser)
        try:
            self.browser = launcher.launch(headless=self.config.headless)
        except PlaywrightError:
            self.playwright.stop()
            self.playwright = None
            raise
        logger.info(f"Launched {self.config.browser} (headless={self.config.headless})")
        return self.browser

    def new_session(self) -> SiteSession:
        """Allocates an isolated, not yet navigated session."""
        if not self.browser:
            self.start()

        context = self.browser.new_context(
            base_url=self.config.base_url,
            viewport=self.config.viewport,
            locale=self.config.locale,
        )
        try:
            context.set_default_timeout(self.config.action_timeout_ms)
            context.set_default_navigation_timeout(self.config.navigation_timeout_ms)
            session = SiteSession(context, self.config.base_url)
        except PlaywrightError:
            context.close()
            raise
        logger.info(f"Session {session.session_id}: opened")
        return session

    @contextmanager
    def open(self, path: str = ROOT_PATH) -> Iterator[SiteSession]:
        """Allocate, navigate, yield, release. Release happens on every exit path."""
        session = self.new_session()
        try:
            session.navigate(path)
            yield session
        finally:
            session.close()

    def close(self):
        """Closes the browser (if launched here) and stops Playwright."""
        if self.browser and self._owns_browser:
            self.browser.close()
        self.browser = None
        if self.playwright:
            self.playwright.stop()
            self.playwright = None

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
