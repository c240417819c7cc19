"""
Conversion Catalog
==================
Static, ordered definitions of every conversion shown on the screen.

Why is this file needed?
------------------------
1. Single source of truth: the window, the session reducer and the tests all
   read the same tuple of categories.
2. Serializable data: each conversion carries a `Transform` record instead of
   a closure, so the catalog can be dumped, compared and table-tested.

Exports:
    Transform: Affine numeric transform (offset, scale, offset).
    ConversionDefinition: One source → destination conversion.
    Category: A titled group of conversions.
    get_catalog(): The ordered catalog (4 categories / 9 conversions).
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterator, Tuple
import logging

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Transform:
    """
    Evaluates ((x + pre_offset) * multiplier) / divisor + post_offset.

    Every step is a separate double operation in that order, so
    Celsius → Fahrenheit (x * 9 / 5 + 32) rounds exactly like the formula.
    """
    multiplier: float = 1.0
    divisor: float = 1.0
    pre_offset: float = 0.0
    post_offset: float = 0.0

    def apply(self, value: float) -> float:
        return (value + self.pre_offset) * self.multiplier / self.divisor + self.post_offset

    def to_dict(self) -> Dict[str, Any]:
        return {
            "multiplier": self.multiplier,
            "divisor": self.divisor,
            "pre_offset": self.pre_offset,
            "post_offset": self.post_offset,
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> Transform:
        return Transform(
            multiplier=float(data.get("multiplier", 1.0)),
            divisor=float(data.get("divisor", 1.0)),
            pre_offset=float(data.get("pre_offset", 0.0)),
            post_offset=float(data.get("post_offset", 0.0)),
        )


def scale(factor: float) -> Transform:
    """x * factor"""
    return Transform(multiplier=factor)


def inverse_scale(factor: float) -> Transform:
    """x / factor"""
    return Transform(divisor=factor)


@dataclass(frozen=True)
class ConversionDefinition:
    key: str
    label: str
    from_unit: str
    to_unit: str
    transform: Transform

    def convert(self, value: float) -> float:
        return self.transform.apply(value)


@dataclass(frozen=True)
class Category:
    """A titled group of conversions. Conversion order is display order."""
    title: str
    icon_name: str
    # Accent colours (start, end) of the category gradient.
    gradient: Tuple[str, str]
    conversions: Tuple[ConversionDefinition, ...]


# ------------------------------------------------------------------------------
# Reference data
# ------------------------------------------------------------------------------
MILES_PER_KM = 0.621371
FEET_PER_METER = 3.28084
LBS_PER_KG = 2.20462

_CATALOG: Tuple[Category, ...] = (
    Category(
        title="Temperature",
        icon_name="thermometer.medium",
        gradient=("orange", "red"),
        conversions=(
            ConversionDefinition(
                key="celsius_to_fahrenheit",
                label="Celsius to Fahrenheit",
                from_unit="°C",
                to_unit="°F",
                transform=Transform(multiplier=9.0, divisor=5.0, post_offset=32.0),
            ),
            ConversionDefinition(
                key="fahrenheit_to_celsius",
                label="Fahrenheit to Celsius",
                from_unit="°F",
                to_unit="°C",
                transform=Transform(pre_offset=-32.0, multiplier=5.0, divisor=9.0),
            ),
        ),
    ),
    Category(
        title="Length",
        icon_name="ruler",
        gradient=("blue", "cyan"),
        conversions=(
            ConversionDefinition(
                key="meters_to_feet",
                label="Meters to Feet",
                from_unit="m",
                to_unit="ft",
                transform=scale(FEET_PER_METER),
            ),
            ConversionDefinition(
                key="feet_to_meters",
                label="Feet to Meters",
                from_unit="ft",
                to_unit="m",
                transform=inverse_scale(FEET_PER_METER),
            ),
            ConversionDefinition(
                key="miles_to_km",
                label="Miles to KM",
                from_unit="mi",
                to_unit="km",
                transform=inverse_scale(MILES_PER_KM),
            ),
        ),
    ),
    Category(
        title="Weight",
        icon_name="scalemass",
        gradient=("purple", "indigo"),
        conversions=(
            ConversionDefinition(
                key="kg_to_lbs",
                label="KG to Lbs",
                from_unit="kg",
                to_unit="lbs",
                transform=scale(LBS_PER_KG),
            ),
            ConversionDefinition(
                key="lbs_to_kg",
                label="Lbs to KG",
                from_unit="lbs",
                to_unit="kg",
                transform=inverse_scale(LBS_PER_KG),
            ),
        ),
    ),
    Category(
        title="Speed",
        icon_name="wind",
        gradient=("mint", "teal"),
        conversions=(
            ConversionDefinition(
                key="kmh_to_mph",
                label="KM/H to MPH",
                from_unit="km/h",
                to_unit="mph",
                transform=scale(MILES_PER_KM),
            ),
            ConversionDefinition(
                key="mph_to_kmh",
                label="MPH to KM/H",
                from_unit="mph",
                to_unit="km/h",
                transform=inverse_scale(MILES_PER_KM),
            ),
        ),
    ),
)

_BY_KEY: Dict[str, ConversionDefinition] = {
    conversion.key: conversion
    for category in _CATALOG
    for conversion in category.conversions
}


def get_catalog() -> Tuple[Category, ...]:
    """Return the ordered catalog. Always the same object."""
    return _CATALOG


def iter_conversions() -> Iterator[ConversionDefinition]:
    """Yield every conversion in display order."""
    for category in _CATALOG:
        yield from category.conversions


def find_conversion(key: str) -> ConversionDefinition:
    """Look up a conversion by key. Raises KeyError for unknown keys."""
    try:
        return _BY_KEY[key]
    except KeyError:
        logger.error(f"Unknown conversion key: {key!r}")
        raise
