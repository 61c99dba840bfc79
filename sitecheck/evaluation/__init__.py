"""Scenario case tables and checks over observed page state."""

from sitecheck.evaluation.cases import InputCase, LinkKind, OrientationPair, SearchCase, Viewport
from sitecheck.evaluation.checks import critical_violations, fits_width, min_dimension, same_site

__all__ = [
    "InputCase",
    "LinkKind",
    "OrientationPair",
    "SearchCase",
    "Viewport",
    "critical_violations",
    "fits_width",
    "min_dimension",
    "same_site",
]
