import functools
import http.server
import os
import threading

import pytest
from playwright.sync_api import Error as PlaywrightError

from sitecheck.browser_interaction.session_manager import SessionManager
from sitecheck.utils.config import SuiteConfig

SITE_DIR = os.path.join(os.path.dirname(__file__), "site")


class QuietHandler(http.server.SimpleHTTPRequestHandler):
    def log_message(self, format, *args):
        pass


@pytest.fixture(scope="session")
def site_url():
    """Serves tests/site on an ephemeral localhost port."""
    handler = functools.partial(QuietHandler, directory=SITE_DIR)
    server = http.server.ThreadingHTTPServer(("127.0.0.1", 0), handler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield f"http://127.0.0.1:{server.server_address[1]}/"
    server.shutdown()
    server.server_close()


@pytest.fixture(scope="session")
def local_config(site_url):
    return SuiteConfig(base_url=site_url, navigation_timeout_ms=10000, action_timeout_ms=3000)


@pytest.fixture(scope="session")
def chromium(local_config):
    manager = SessionManager(local_config)
    try:
        browser = manager.start()
    except PlaywrightError as e:
        manager.close()
        pytest.skip(f"chromium is not installed: {str(e).splitlines()[0]}")
    yield browser
    manager.close()


@pytest.fixture
def manager(chromium, local_config):
    return SessionManager(local_config, browser=chromium)
