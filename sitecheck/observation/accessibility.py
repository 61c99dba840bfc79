"""axe-core accessibility scan of the current page.

The audit engine is injected from a script URL and run in the page; this
module only loads it and turns its result into AxeViolation models.
"""

from playwright.sync_api import Page, Error as PlaywrightError
from typing import Any, Dict, List, Optional
import logging

from sitecheck.shared.errors import AxeUnavailable
from sitecheck.shared.schemas import AxeViolation

logger = logging.getLogger(__name__)

RUN_AXE = """async (options) => {
    return await axe.run(document, options || {});
}"""


class AccessibilityScanner:
    def __init__(self, page: Page, script_url: str):
        self.page = page
        self.script_url = script_url

    def _inject(self):
        if self.page.evaluate("() => typeof window.axe !== 'undefined'"):
            return
        try:
            self.page.add_script_tag(url=self.script_url)
        except PlaywrightError as e:
            raise AxeUnavailable(f"Could not load axe-core from {self.script_url}: {str(e).splitlines()[0]}") from e
        if not self.page.evaluate("() => typeof window.axe !== 'undefined'"):
            raise AxeUnavailable(f"axe-core did not register from {self.script_url}")

    def run(self, options: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Returns the raw axe results object."""
        self._inject()
        return self.page.evaluate(RUN_AXE, options)

    def scan(self, options: Optional[Dict[str, Any]] = None) -> List[AxeViolation]:
        results = self.run(options)
        violations = parse_violations(results)
        logger.info(f"axe reported {len(violations)} violation(s) on {self.page.url}")
        return violations


def parse_violations(results: Dict[str, Any]) -> List[AxeViolation]:
    return [
        AxeViolation(
            id=v.get("id", ""),
            impact=v.get("impact"),
            description=v.get("description", ""),
            helpUrl=v.get("helpUrl"),
            node_count=len(v.get("nodes") or []),
        )
        for v in results.get("violations", [])
    ]
