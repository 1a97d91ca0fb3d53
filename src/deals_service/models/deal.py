"""
Deal domain model as stored in DynamoDB.

A deal occupies exactly one item under the self-referential composite key
``PK = SK = DEAL#<id>``. Attribute names follow the single-table layout shared
with the other services reading the table.
"""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Annotated, Any, Dict, Literal

from pydantic import BaseModel, ConfigDict, Field

from deals_service.models.input import CreateDealRequest, DealCategory

DEAL_KEY_PREFIX = 'DEAL#'
DEAL_ENTITY_TYPE = 'Deal'


def deal_key(deal_id: str) -> str:
    return f'{DEAL_KEY_PREFIX}{deal_id}'


class DealEntity(BaseModel):
    """Core Deal domain model."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    pk: Annotated[str, Field(alias='PK', description='Partition key: DEAL#<id>')]
    sk: Annotated[str, Field(alias='SK', description='Sort key: DEAL#<id>')]
    entity_type: Annotated[Literal['Deal'], Field(alias='EntityType')] = DEAL_ENTITY_TYPE
    id: Annotated[str, Field(alias='Id', description='KSUID of the deal')]
    title: Annotated[str, Field(alias='Title')]
    original_price: Annotated[float, Field(alias='OriginalPrice')]
    discount: Annotated[float, Field(alias='Discount', description='Percentage 0-100')]
    category: Annotated[DealCategory, Field(alias='Category')]
    expiration: Annotated[str, Field(alias='Expiration', description='ISO 8601 date-time')]
    merchant_id: Annotated[str, Field(alias='MerchantId')]
    logo_file_key: Annotated[str, Field(alias='LogoFileKey')]
    created_at: Annotated[str, Field(alias='CreatedAt', description='ISO 8601 creation timestamp')]

    @classmethod
    def create(cls, request: CreateDealRequest, deal_id: str) -> 'DealEntity':
        """
        Build the storage entity for a validated request.

        Pure apart from reading the clock for ``CreatedAt``.

        Args:
            request: Normalized and validated create-deal request
            deal_id: Server-generated deal identifier

        Returns:
            The deal entity keyed by ``DEAL#<deal_id>``
        """
        key = deal_key(deal_id)
        return cls(
            pk=key,
            sk=key,
            entity_type=DEAL_ENTITY_TYPE,
            id=deal_id,
            title=request.title,
            original_price=float(request.original_price),
            discount=float(request.discount),
            category=request.category,
            expiration=request.expiration,
            merchant_id=request.user_id,
            logo_file_key=request.logo_file_key,
            created_at=datetime.now(timezone.utc).isoformat(),
        )

    def to_dynamodb_item(self) -> Dict[str, Any]:
        """
        Convert to a DynamoDB item.

        The boto3 resource API rejects ``float``, so numbers are written as
        ``Decimal`` built from their string form.
        """
        item = self.model_dump(by_alias=True, mode='json')
        item['OriginalPrice'] = Decimal(str(self.original_price))
        item['Discount'] = Decimal(str(self.discount))
        return item

    @classmethod
    def from_dynamodb_item(cls, item: Dict[str, Any]) -> 'DealEntity':
        return cls.model_validate(item)
