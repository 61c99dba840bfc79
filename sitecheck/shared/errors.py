"""Exceptions raised by the session provider and its helpers."""


class SiteCheckError(Exception):
    pass


class ConfigError(SiteCheckError):
    pass


class NavigationError(SiteCheckError):
    """The initial navigation of a fresh session failed (a setup failure)."""

    def __init__(self, url: str, reason: str):
        super().__init__(f"Navigation to {url} failed: {reason}")
        self.url = url
        self.reason = reason


class SessionClosedError(SiteCheckError):
    pass


class AxeUnavailable(SiteCheckError):
    """axe-core could not be injected into the page."""
