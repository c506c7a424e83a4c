"""
Validation component models.

Coupon catalog entries, validation configuration and the input types
accepted by the component's run() entry point.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

# --- Catalog ---


@dataclass(frozen=True)
class Coupon:
    """Catalog entry pairing a code with a fractional discount."""

    code: str
    discount: float

    def __post_init__(self) -> None:
        if not self.code:
            raise ValueError("Coupon code is required")
        if not 0 < self.discount < 1:
            raise ValueError(
                f"Coupon discount must be between 0 and 1, got {self.discount}"
            )


DEFAULT_COUPONS: tuple[Coupon, ...] = (
    Coupon(code="SAVE10", discount=0.1),
    Coupon(code="SAVE20", discount=0.2),
)


# --- Configuration ---


@dataclass(frozen=True)
class ValidationConfig:
    """Validation configuration from rules."""

    coupons: tuple[Coupon, ...] = DEFAULT_COUPONS
    username_min_length: int = 5
    username_max_length: int = 15
    input_username_min_length: int = 3
    input_username_max_length: int = 255
    min_age: int = 18
    driving_ages: Mapping[str, int] = field(
        default_factory=lambda: {"US": 16, "UK": 17}
    )

    def __post_init__(self) -> None:
        # read-only copy so the frozen config cannot change in place
        object.__setattr__(
            self, "driving_ages", MappingProxyType(dict(self.driving_ages))
        )


# --- Inputs ---


@dataclass(frozen=True)
class DiscountInput:
    price: Any
    code: Any


@dataclass(frozen=True)
class PriceRangeInput:
    price: float
    min_price: float
    max_price: float


@dataclass(frozen=True)
class UsernameInput:
    username: Any


@dataclass(frozen=True)
class UserInput:
    """Registration input; validated, never stored."""

    username: Any
    age: Any


@dataclass(frozen=True)
class CanDriveInput:
    age: int
    country_code: str


# --- Errors ---


class UnknownCountryError(ValueError):
    """No minimum driving age is configured for the country."""

    def __init__(self, country_code: str) -> None:
        self.country_code = country_code
        super().__init__(f"Unknown country code: {country_code}")
