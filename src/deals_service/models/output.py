"""
Output models for API responses using Pydantic.

These models document the response bodies of the deals API and drive the
generated OpenAPI document.
"""

from typing import Annotated, Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class CreateDealOutput(BaseModel):
    """Response model for successful deal creation."""

    model_config = ConfigDict(populate_by_name=True)

    message: Annotated[str, Field(
        description='Human readable outcome',
        examples=['Deal successfully created'],
    )] = 'Deal successfully created'

    deal_id: Annotated[str, Field(
        alias='dealId',
        min_length=27,
        max_length=27,
        description='KSUID of the created deal',
        examples=['2D9RGmKVg3KKf7mJJQhWWqH9Gfm'],
    )]


class FieldErrorsOutput(BaseModel):
    """Field level schema violations."""

    model_config = ConfigDict(populate_by_name=True)

    form_errors: Annotated[List[str], Field(alias='formErrors')] = []
    field_errors: Annotated[Dict[str, List[str]], Field(alias='fieldErrors')] = {}


class ErrorOutput(BaseModel):
    """Response model for every error response."""

    error: Annotated[str, Field(
        description='Short human readable error',
        examples=['Invalid request body', 'Deal already exists'],
    )]

    details: Annotated[Optional[Any], Field(
        description='Machine readable details when available',
    )] = None
