"""
Data models for the deals service.

- input: request payload validation
- deal: storage entity
- output: response bodies
"""

from deals_service.models.deal import DealEntity
from deals_service.models.input import CreateDealRequest, DealCategory
from deals_service.models.output import CreateDealOutput, ErrorOutput, FieldErrorsOutput

__all__ = [
    "DealEntity",
    "CreateDealRequest",
    "DealCategory",
    "CreateDealOutput",
    "ErrorOutput",
    "FieldErrorsOutput",
]
