import os
import yaml
from dataclasses import dataclass, fields, replace
from typing import Optional

from sitecheck.shared.errors import ConfigError

BROWSERS = ("chromium", "firefox", "webkit")
SCREENSHOT_MODES = ("on", "off", "only-on-failure")


@dataclass
class SuiteConfig:
    # Target
    base_url: str = "https://www.nasa.gov/"
    expected_title: str = "NASA"

    # Browser
    browser: str = "chromium"
    headless: bool = True
    viewport_width: int = 1280
    viewport_height: int = 720
    locale: str = "en-US"

    # Timeouts (ms); a timed out operation fails the test, nothing is retried
    navigation_timeout_ms: int = 30000
    action_timeout_ms: int = 5000

    # Accessibility
    axe_script_url: str = "https://cdnjs.cloudflare.com/ajax/libs/axe-core/4.9.1/axe.min.js"

    # Artifacts
    artifacts_dir: str = "test-results"
    screenshot: str = "only-on-failure"

    @classmethod
    def load(cls, path: Optional[str] = None) -> "SuiteConfig":
        if not path or not os.path.exists(path):
            return cls()

        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ConfigError(f"{path} must hold a mapping of config keys, got {type(data).__name__}")

        known = {f.name for f in fields(cls)}
        unknown = sorted(str(k) for k in set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown config keys in {path}: {', '.join(unknown)}")

        return cls(**data).validate()

    def with_overrides(self, **overrides) -> "SuiteConfig":
        """Returns a copy with every non-None override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes).validate()

    def validate(self) -> "SuiteConfig":
        for f in fields(self):
            value = getattr(self, f.name)
            # bool is an int subclass, so it is checked exactly
            if (type(value) is bool and f.type is not bool) or not isinstance(value, f.type):
                raise ConfigError(f"{f.name} must be {f.type.__name__}, got {value!r}")
        if self.browser not in BROWSERS:
            raise ConfigError(f"browser must be one of {BROWSERS}, got {self.browser!r}")
        if self.screenshot not in SCREENSHOT_MODES:
            raise ConfigError(f"screenshot must be one of {SCREENSHOT_MODES}, got {self.screenshot!r}")
        for name in ("viewport_width", "viewport_height", "navigation_timeout_ms", "action_timeout_ms"):
            if getattr(self, name) <= 0:
                raise ConfigError(f"{name} must be positive")
        if not self.base_url.startswith(("http://", "https://")):
            raise ConfigError(f"base_url must be an http(s) URL, got {self.base_url!r}")
        return self

    @property
    def viewport(self) -> dict:
        return {"width": self.viewport_width, "height": self.viewport_height}
