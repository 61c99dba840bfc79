import os
import re
from typing import Optional
import logging

from playwright.sync_api import Error as PlaywrightError

from sitecheck.browser_interaction.session_manager import SiteSession
from sitecheck.observation.visual_capture import VisualCapture
from sitecheck.shared.schemas import SessionRecord

logger = logging.getLogger(__name__)


def slugify(nodeid: str) -> str:
    """Turns a pytest node id into a directory name safe on every OS."""
    slug = re.sub(r"[^A-Za-z0-9_.-]+", "-", nodeid).strip("-")
    return slug[:180] or "test"


class ArtifactWriter:
    """Writes a screenshot and a JSON session record for one finished test."""

    def __init__(self, artifacts_dir: str):
        self.artifacts_dir = artifacts_dir

    def test_dir(self, nodeid: str) -> str:
        path = os.path.join(self.artifacts_dir, slugify(nodeid))
        os.makedirs(path, exist_ok=True)
        return path

    def record(self, session: SiteSession, nodeid: str, outcome: str, screenshot: bool) -> SessionRecord:
        """Captures the session state. Must run before the session is closed.

        Filesystem errors are logged and leave the record unsaved; they never
        turn a finished test into an error.
        """
        try:
            out_dir: Optional[str] = self.test_dir(nodeid)
        except OSError as e:
            logger.warning(f"Could not create artifacts directory for {nodeid}: {e}")
            out_dir = None

        screenshot_path: Optional[str] = None
        url = title = None
        try:
            url = session.page.url
            title = session.page.title()
            if screenshot and out_dir:
                screenshot_path = VisualCapture(session.page).save(os.path.join(out_dir, "screenshot.png"))
        except PlaywrightError as e:
            # Page may be crashed or mid-navigation; the test outcome stands either way
            logger.warning(f"Could not capture artifacts for {nodeid}: {str(e).splitlines()[0]}")
        except OSError as e:
            logger.warning(f"Could not write screenshot for {nodeid}: {e}")

        record = SessionRecord(
            nodeid=nodeid,
            session_id=session.session_id,
            outcome=outcome,
            url=url,
            title=title,
            viewport=session.page.viewport_size,
            console_errors=list(session.console_errors),
            page_errors=list(session.page_errors),
            screenshot_path=screenshot_path,
        )
        if out_dir:
            try:
                self.save(record, out_dir)
            except OSError as e:
                logger.warning(f"Could not write session record for {nodeid}: {e}")
        return record

    @staticmethod
    def save(record: SessionRecord, out_dir: str) -> str:
        filepath = os.path.join(out_dir, "session.json")
        with open(filepath, "w") as f:
            f.write(record.model_dump_json(indent=2))
        return filepath
