"""Pure predicates over values observed in the page."""

from typing import Dict, Iterable, List, Optional, Sequence
from urllib.parse import urlparse

from sitecheck.shared.schemas import AxeViolation

IMAGE_FORMATS = (".jpg", ".png", ".gif", ".webp", ".svg")


def critical_violations(violations: Iterable[AxeViolation], impacts: Sequence[str] = ("critical",)) -> List[AxeViolation]:
    return [v for v in violations if v.impact in impacts]


def fits_width(scroll_width: int, viewport_width: int, tolerance: int = 20) -> bool:
    """True if content is no wider than the viewport plus a scrollbar allowance."""
    return scroll_width <= viewport_width + tolerance


def min_dimension(box: Optional[Dict[str, float]]) -> Optional[float]:
    if not box:
        return None
    return min(box["width"], box["height"])


def same_site(url: str, base_url: str) -> bool:
    """True if url is on the base URL's registrable host (www. ignored)."""
    host = (urlparse(url).hostname or "").lower()
    base = (urlparse(base_url).hostname or "").lower()
    if base.startswith("www."):
        base = base[4:]
    return host == base or host.endswith("." + base)


def is_image_href(href: Optional[str], formats: Sequence[str] = IMAGE_FORMATS) -> bool:
    if not href:
        return False
    lowered = href.lower()
    return any(fmt in lowered for fmt in formats)


# HTML autofill field names (WHATWG "autofill detail tokens")
AUTOFILL_FIELDS = frozenset("""
    name honorific-prefix given-name additional-name family-name honorific-suffix nickname
    username new-password current-password one-time-code organization-title organization
    street-address address-line1 address-line2 address-line3 address-level4 address-level3
    address-level2 address-level1 country country-name postal-code cc-name cc-given-name
    cc-additional-name cc-family-name cc-number cc-exp cc-exp-month cc-exp-year cc-csc cc-type
    transaction-currency transaction-amount language bday bday-day bday-month bday-year sex url
    photo tel tel-country-code tel-national tel-area-code tel-local tel-local-prefix
    tel-local-suffix tel-extension email impp
""".split())
AUTOFILL_CONTACTS = frozenset(("home", "work", "mobile", "fax", "pager"))


def is_autocomplete_value(value: str) -> bool:
    """True if value is empty, "on", "off" or a well-formed autofill detail token list."""
    tokens = value.lower().split()
    if tokens in ([], ["on"], ["off"]):
        return True
    if tokens and tokens[-1] == "webauthn":
        tokens = tokens[:-1]
    if not tokens or tokens[-1] not in AUTOFILL_FIELDS:
        return False
    rest = tokens[:-1]
    if rest and rest[-1] in AUTOFILL_CONTACTS:
        rest = rest[:-1]
    if rest and rest[-1] in ("shipping", "billing"):
        rest = rest[:-1]
    if rest and rest[-1].startswith("section-"):
        rest = rest[:-1]
    return not rest
