from pydantic import BaseModel, Field


class ProjectRules(BaseModel):
    slug: str
    rules_version: str


class RangeRule(BaseModel):
    min: int
    max: int


class CouponRule(BaseModel):
    code: str = Field(min_length=1)
    discount: float = Field(gt=0, lt=1)


class UserInputRules(BaseModel):
    username: RangeRule
    min_age: int


class DrivingRules(BaseModel):
    # country code -> minimum driving age
    minimum_age: dict[str, int]


class ShippingRateRule(BaseModel):
    cost: float = Field(ge=0)
    estimated_days: int = Field(ge=0)


class CurrencyRules(BaseModel):
    rates: dict[str, float]


class SecurityRules(BaseModel):
    login_code_digits: int = Field(ge=4, le=12)


class Rules(BaseModel):
    project: ProjectRules
    coupons: list[CouponRule] = Field(min_length=1)
    usernames: RangeRule
    user_input: UserInputRules
    driving: DrivingRules
    currency: CurrencyRules
    shipping: dict[str, ShippingRateRule]
    security: SecurityRules
