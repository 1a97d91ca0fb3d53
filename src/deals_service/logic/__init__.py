"""
Business Logic Layer Module.

Implements the middle layer of the three-layer layout: request normalization,
the expiration rule, identifier generation and the create-deal workflow.
Functions return ``Result`` values and never render HTTP responses.
"""

from deals_service.logic.deal_service import create_deal

__all__ = [
    "create_deal",
]
