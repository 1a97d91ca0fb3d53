"""
Data Access Layer (DAL) for the deals service.

Defines the persistence interface used by the logic layer and the factory
returning the DynamoDB implementation.
"""

from abc import ABC, abstractmethod
from functools import lru_cache
from typing import Optional, Protocol, runtime_checkable

from deals_service.handlers.utils.errors import Result
from deals_service.models.deal import DealEntity


@runtime_checkable
class DealsDalHandler(Protocol):
    """Protocol defining the data access layer interface."""

    def save_deal(self, deal: DealEntity) -> Result[DealEntity]:
        """Store a new deal, failing if its key already exists."""
        ...


class BaseDalHandler(ABC):
    """Abstract base class for data access layer implementations."""

    def __init__(self, table_name: str) -> None:
        """
        Initialize the DAL handler.

        Args:
            table_name: Name of the database table
        """
        self.table_name = table_name

    @abstractmethod
    def save_deal(self, deal: DealEntity) -> Result[DealEntity]:
        """Store a new deal, failing if its key already exists."""
        pass


@lru_cache
def get_dal_handler(
    table_name: str,
    expose_error_details: bool = True,
    endpoint_url: Optional[str] = None,
) -> BaseDalHandler:
    """
    Return the DynamoDB handler for a table.

    Handlers are cached per argument set so warm invocations reuse the boto3
    resource.
    """
    from deals_service.dal.dynamodb_handler import DynamoDBDealsHandler

    return DynamoDBDealsHandler(
        table_name=table_name,
        expose_error_details=expose_error_details,
        endpoint_url=endpoint_url,
    )
