"""
Validation component.

Pure functions for coupon discounts, price ranges and user input checks.
Caller-facing validation failures are returned as strings containing
"Invalid"; configuration gaps (unknown country) raise.
"""

from __future__ import annotations

import math
from typing import Any

from kata.rules.models import Rules

from .models import (
    CanDriveInput,
    Coupon,
    DiscountInput,
    PriceRangeInput,
    UnknownCountryError,
    UserInput,
    UsernameInput,
    ValidationConfig,
)

SUCCESS_MESSAGE = "Validation successful"
INVALID_PRICE = "Invalid price"
INVALID_CODE = "Invalid discount code"
INVALID_USERNAME = "Invalid username"
INVALID_AGE = "Invalid age"


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never a valid price or age; nor is nan/inf
    return (
        isinstance(value, (int, float))
        and not isinstance(value, bool)
        and math.isfinite(value)
    )


# --- Pure Functions ---


def get_coupons(config: ValidationConfig | None = None) -> list[Coupon]:
    """Return the coupon catalog."""
    config = config or ValidationConfig()
    return list(config.coupons)


def calculate_discount(
    price: Any,
    code: Any,
    config: ValidationConfig | None = None,
) -> float | str:
    """
    Apply a coupon code to a price.

    Args:
        price: Positive number
        code: Coupon code (exact match)
        config: Optional validation config holding the catalog

    Returns:
        Discounted price, the unchanged price for unknown codes,
        or an "Invalid ..." message for bad arguments.
    """
    config = config or ValidationConfig()

    if not _is_number(price) or price <= 0:
        return INVALID_PRICE
    if not isinstance(code, str):
        return INVALID_CODE

    for coupon in config.coupons:
        if coupon.code == code:
            return price * (1 - coupon.discount)

    return price


def is_price_in_range(price: float, min_price: float, max_price: float) -> bool:
    return min_price <= price <= max_price


def is_valid_username(username: Any, config: ValidationConfig | None = None) -> bool:
    config = config or ValidationConfig()

    if not isinstance(username, str):
        return False
    return (
        config.username_min_length <= len(username) <= config.username_max_length
    )


def validate_user_input(
    username: Any,
    age: Any,
    config: ValidationConfig | None = None,
) -> str:
    """
    Validate registration input.

    Every failing field contributes its own message, so a caller can
    match on "Invalid username" and "Invalid age" independently.
    """
    config = config or ValidationConfig()
    errors: list[str] = []

    if (
        not isinstance(username, str)
        or len(username) < config.input_username_min_length
        or len(username) > config.input_username_max_length
    ):
        errors.append(INVALID_USERNAME)

    if not _is_number(age) or age < config.min_age:
        errors.append(INVALID_AGE)

    return ", ".join(errors) if errors else SUCCESS_MESSAGE


def can_drive(
    age: int,
    country_code: str,
    config: ValidationConfig | None = None,
) -> bool:
    """
    Check the legal driving age for a country.

    Raises:
        UnknownCountryError: No minimum age configured for country_code
    """
    config = config or ValidationConfig()

    minimum = config.driving_ages.get(country_code)
    if minimum is None:
        raise UnknownCountryError(country_code)
    return age >= minimum


# --- Run Function (Atomic Component Pattern) ---


def run(
    input_data: DiscountInput | PriceRangeInput | UsernameInput | UserInput | CanDriveInput,
    config: ValidationConfig | None = None,
) -> float | str | bool:
    """
    Run a validation operation based on input type.

    This is the main entry point following the atomic component pattern.
    """
    config = config or ValidationConfig()

    if isinstance(input_data, DiscountInput):
        return calculate_discount(input_data.price, input_data.code, config)

    if isinstance(input_data, PriceRangeInput):
        return is_price_in_range(
            input_data.price, input_data.min_price, input_data.max_price
        )

    if isinstance(input_data, UsernameInput):
        return is_valid_username(input_data.username, config)

    if isinstance(input_data, UserInput):
        return validate_user_input(input_data.username, input_data.age, config)

    if isinstance(input_data, CanDriveInput):
        return can_drive(input_data.age, input_data.country_code, config)

    raise TypeError(f"Unknown input type: {type(input_data)}")


# --- Configuration Loader ---


def load_config_from_rules(rules: Rules) -> ValidationConfig:
    """
    Load ValidationConfig from rules.yaml.

    Args:
        rules: Validated rules model

    Returns:
        ValidationConfig instance
    """
    return ValidationConfig(
        coupons=tuple(Coupon(code=c.code, discount=c.discount) for c in rules.coupons),
        username_min_length=rules.usernames.min,
        username_max_length=rules.usernames.max,
        input_username_min_length=rules.user_input.username.min,
        input_username_max_length=rules.user_input.username.max,
        min_age=rules.user_input.min_age,
        driving_ages=dict(rules.driving.minimum_age),
    )
