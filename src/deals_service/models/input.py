"""
Input models for request validation using Pydantic.

The create-deal payload arrives with camelCase wire names; the models expose
snake_case attributes and validate by alias.
"""

from datetime import datetime
from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator


class DealCategory(str, Enum):
    """Closed set of deal categories."""

    FOOD_DRINK = 'foodDrink'
    BATHROOM = 'bathroom'
    JEWELERY = 'jewelery'
    SPORTS = 'sports'
    TECH = 'tech'
    AUTO = 'auto'
    ENTERTAINMENT = 'entertainment'
    TRAVEL = 'travel'


def parse_iso_datetime(value: str) -> datetime:
    """Parse an ISO 8601 date or date-time string, accepting a trailing ``Z``."""
    return datetime.fromisoformat(value.strip())


class CreateDealRequest(BaseModel):
    """Request model for creating a new deal."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: Annotated[str, Field(
        alias='userId',
        min_length=1,
        description='Identifier of the merchant submitting the deal',
        examples=['merchant-123'],
    )]

    title: Annotated[str, Field(
        min_length=1,
        max_length=255,
        description='Deal title',
        examples=['50% Off Pizza'],
    )]

    original_price: Annotated[float, Field(
        alias='originalPrice',
        ge=1,
        allow_inf_nan=False,
        description='Price before discount; numeric strings are coerced',
        examples=[20.0, '20.00'],
    )]

    discount: Annotated[float, Field(
        ge=0,
        le=100,
        allow_inf_nan=False,
        description='Discount percentage; numeric strings are coerced',
        examples=[50, '15'],
    )]

    logo_file_key: Annotated[str, Field(
        alias='logoFileKey',
        min_length=1,
        description='Object key of the uploaded deal logo',
        examples=['logos/pizza.png'],
    )]

    category: Annotated[DealCategory, Field(
        description='Deal category',
        examples=['foodDrink'],
    )]

    expiration: Annotated[str, Field(
        description='Deal expiration as an ISO 8601 date-time',
        examples=['2025-12-31T23:59:59Z'],
    )]

    @field_validator('expiration')
    @classmethod
    def validate_expiration_format(cls, v: str) -> str:
        """Validate that expiration parses as an ISO 8601 date-time."""
        try:
            parse_iso_datetime(v)
        except ValueError:
            raise ValueError('Invalid ISO 8601 date-time')
        return v

    @property
    def expires_at(self) -> datetime:
        return parse_iso_datetime(self.expiration)
