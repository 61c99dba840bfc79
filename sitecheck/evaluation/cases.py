"""Data tables for the parametrized site scenarios."""

from dataclasses import dataclass
from typing import Dict, List


@dataclass(frozen=True)
class SearchCase:
    query: str
    min_results: int
    description: str
    """Shown in the test id."""


@dataclass(frozen=True)
class InputCase:
    value: str
    description: str


@dataclass(frozen=True)
class Viewport:
    name: str
    width: int
    height: int

    @property
    def size(self) -> Dict[str, int]:
        return {"width": self.width, "height": self.height}

    @property
    def label(self) -> str:
        return f"{self.name} ({self.width}x{self.height})"


@dataclass(frozen=True)
class OrientationPair:
    name: str
    portrait: Viewport
    landscape: Viewport


@dataclass(frozen=True)
class LinkKind:
    selector: str
    description: str


def ids(cases: List) -> List[str]:
    """pytest ids for a case table: description, label or name, whichever exists."""
    out = []
    for case in cases:
        out.append(
            getattr(case, "description", None)
            or getattr(case, "label", None)
            or getattr(case, "name", None)
            or str(case)
        )
    return out


SEARCH_CASES: List[SearchCase] = [
    SearchCase("Mars", 1, "Planet search"),
    SearchCase("NASA", 1, "Organization search"),
    SearchCase("Space Station", 1, "Multi-word search"),
    SearchCase("Apollo 11", 1, "Historical event search"),
    SearchCase("Artemis", 1, "Mission search"),
    SearchCase("moon landing", 1, "Event search with lowercase"),
    SearchCase("SpaceX", 0, "Commercial entity search (may have limited results)"),
]

EDGE_QUERIES: List[InputCase] = [
    InputCase("***", "Special characters only"),
    InputCase("123", "Numbers only"),
    InputCase("!@#$%", "Symbols only"),
    InputCase(" ", "Whitespace only"),
    InputCase("a", "Single character"),
]

CASE_VARIATIONS: List[str] = ["mars", "MARS", "Mars", "MaRs"]

LONG_QUERY = (
    "This is a very long search query that contains many words and should "
    "still be handled properly by the search functionality"
)

HOSTILE_INPUTS: List[InputCase] = [
    InputCase("<script>alert('xss')</script>", "XSS attempt with script tags"),
    InputCase("'; DROP TABLE users; --", "SQL injection attempt"),
    InputCase("<img src=x onerror=alert('xss')>", "HTML injection"),
    InputCase("../../etc/passwd", "Path traversal attempt"),
    InputCase("${process.env.NODE_ENV}", "Template injection"),
    InputCase(r"\x3cscript\x3e", "Hex encoded script"),
]

UNICODE_INPUTS: List[InputCase] = [
    InputCase("🚀 Mars", "Emoji with text"),
    InputCase("火星 Mars", "Chinese characters with English"),
    InputCase("火星مريخ", "Mixed scripts"),
    InputCase("Москва", "Cyrillic characters"),
    InputCase("العربية", "Arabic characters"),
    InputCase("🌍🌎🌏", "Only emojis"),
]

NUMERIC_INPUTS: List[InputCase] = [
    InputCase("0", "Zero"),
    InputCase("-1", "Negative number"),
    InputCase("999999999999999999", "Very large number"),
    InputCase("3.14159", "Decimal number"),
    InputCase("1e10", "Scientific notation"),
]

WHITESPACE_INPUTS: List[InputCase] = [
    InputCase(" ", "Single space"),
    InputCase("\t", "Tab character"),
    InputCase("\n", "Newline character"),
    InputCase("   \n\t     ", "Mixed whitespace"),
]

VIEWPORTS: List[Viewport] = [
    Viewport("iPhone SE", 375, 667),
    Viewport("iPhone 12", 390, 844),
    Viewport("iPhone 14 Pro Max", 430, 932),
    Viewport("Samsung Galaxy S21", 360, 800),
    Viewport("iPad (7th generation)", 810, 1080),
    Viewport("iPad Pro 12.9", 1024, 1366),
    Viewport("Desktop HD", 1280, 720),
    Viewport("Desktop Full HD", 1920, 1080),
    Viewport("Desktop 2K", 2560, 1440),
    Viewport("Desktop 4K", 3840, 2160),
]

ORIENTATIONS: List[OrientationPair] = [
    OrientationPair("Mobile", Viewport("portrait", 375, 667), Viewport("landscape", 667, 375)),
    OrientationPair("Tablet", Viewport("portrait", 768, 1024), Viewport("landscape", 1024, 768)),
]

READABILITY_VIEWPORTS: List[Viewport] = [
    Viewport("Mobile", 375, 667),
    Viewport("Tablet", 768, 1024),
    Viewport("Desktop", 1920, 1080),
]

MOBILE = Viewport("Mobile", 375, 667)
NARROW = Viewport("Narrow", 320, 480)

LINK_KINDS: List[LinkKind] = [
    LinkKind("a[href^='http']", "External links"),
    LinkKind("a[href^='/']", "Absolute path links"),
    LinkKind("a[href^='./']", "Relative path links"),
    LinkKind("a[href='#']", "Anchor links"),
]

PLAYBACK_RATES: List[float] = [0.5, 0.75, 1, 1.25, 1.5, 2]
