"""
Validation component.

Public API for coupon discounts and input validation.
"""

from .component import (
    INVALID_AGE,
    INVALID_CODE,
    INVALID_PRICE,
    INVALID_USERNAME,
    SUCCESS_MESSAGE,
    calculate_discount,
    can_drive,
    get_coupons,
    is_price_in_range,
    is_valid_username,
    load_config_from_rules,
    run,
    validate_user_input,
)
from .models import (
    DEFAULT_COUPONS,
    CanDriveInput,
    Coupon,
    DiscountInput,
    PriceRangeInput,
    UnknownCountryError,
    UserInput,
    UsernameInput,
    ValidationConfig,
)

__all__ = [
    # Functions
    "calculate_discount",
    "can_drive",
    "get_coupons",
    "is_price_in_range",
    "is_valid_username",
    "load_config_from_rules",
    "run",
    "validate_user_input",
    # Messages
    "INVALID_AGE",
    "INVALID_CODE",
    "INVALID_PRICE",
    "INVALID_USERNAME",
    "SUCCESS_MESSAGE",
    # Models
    "DEFAULT_COUPONS",
    "CanDriveInput",
    "Coupon",
    "DiscountInput",
    "PriceRangeInput",
    "UserInput",
    "UsernameInput",
    "ValidationConfig",
    # Errors
    "UnknownCountryError",
]
