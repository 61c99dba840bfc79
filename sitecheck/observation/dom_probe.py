from playwright.sync_api import Page, Locator
from typing import Dict, Any, Optional


class DOMProbe:
    """Reads layout and element state out of the live page via script evaluation."""

    def __init__(self, page: Page):
        self.page = page

    def body_text(self) -> str:
        return self.page.locator("body").text_content() or ""

    def body_html(self) -> str:
        return self.page.locator("body").inner_html()

    def body_count(self) -> int:
        return self.page.locator("body").count()

    def scroll_width(self) -> int:
        return self.page.evaluate("() => document.body.scrollWidth")

    def has_horizontal_overflow(self) -> bool:
        return self.page.evaluate(
            "() => document.documentElement.scrollWidth > window.innerWidth"
        )

    def inner_width(self) -> int:
        return self.page.evaluate("() => window.innerWidth")

    def body_font_size(self) -> float:
        """Computed font size of <body> in px."""
        return self.page.evaluate(
            "() => Number.parseFloat(getComputedStyle(document.body).fontSize)"
        )

    def active_tag(self) -> Optional[str]:
        return self.page.evaluate(
            "() => document.activeElement ? document.activeElement.tagName : null"
        )

    def has_active_element(self) -> bool:
        return self.page.evaluate("() => document.activeElement !== null")

    def set_zoom(self, percent: int):
        self.page.evaluate("(z) => { document.body.style.zoom = z + '%'; }", percent)

    def set_hash(self, fragment: str):
        self.page.evaluate("(h) => { location.hash = h; }", fragment)

    def history_length(self) -> int:
        return self.page.evaluate("() => history.length")

    def scroll_by_viewport(self):
        self.page.evaluate("() => window.scrollBy(0, window.innerHeight)")

    def mute_all_videos(self) -> int:
        """Mutes every <video>; returns how many were found."""
        return self.page.evaluate(
            """() => {
                const videos = Array.from(document.querySelectorAll('video'));
                videos.forEach(v => { v.muted = true; });
                return videos.length;
            }"""
        )

    # Per-element probes

    @staticmethod
    def media_state(video: Locator) -> Dict[str, Any]:
        return video.evaluate(
            """(v) => ({
                duration: v.duration,
                currentTime: v.currentTime,
                paused: v.paused,
                muted: v.muted,
                volume: v.volume,
                playbackRate: v.playbackRate,
                readyState: v.readyState,
                networkState: v.networkState,
            })"""
        )

    @staticmethod
    def image_geometry(image: Locator) -> Dict[str, int]:
        return image.evaluate(
            """(el) => ({
                width: el.width,
                height: el.height,
                naturalWidth: el.naturalWidth,
                naturalHeight: el.naturalHeight,
            })"""
        )
