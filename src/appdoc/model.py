import enum

from datetime import date as Date
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


def _create(cls, data=None, **kwargs):
    """Build a model from a record mapping, `kwargs` taking precedence."""
    if data is not None and not isinstance(data, dict):
        raise ValueError(f"Unable to extract data from object: {data!r}")

    return cls(**{**(data or {}), **kwargs})


class DataModel(BaseModel):
    """
    Pydantic BaseModel with custom defaults:
    - frozen = True
    - `set` method to update and create a new instance.
    - `create` method to construct a new instance from a record mapping
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    create = classmethod(_create)

    def set(self, **kwargs):
        return self.model_copy(update=kwargs)


class ApplicationState(enum.Enum):
    PENDING = ("PENDING", "Pending")
    ACTIVATED = ("ACTIVATED", "Activated")
    IN_REVIEW = ("IN_REVIEW", "In Review")
    CLOSED = ("CLOSED", "Closed")

    def __new__(cls, value, description):
        member = object.__new__(cls)
        member._value_ = value
        member.description = description
        return member

    def __str__(self):
        return self.value


class Person(DataModel):
    first_name: str
    surname: str

    @property
    def full_name(self):
        return f"{self.first_name} {self.surname}"


class Fund(DataModel):
    fund_id: str
    name: str
    amount: Decimal = Decimal(0)
    fees: Decimal = Decimal(0)


class Product(DataModel):
    product_id: str
    name: str
    funds: List[Fund] = Field(default_factory=list)


class Review(DataModel):
    reason: Optional[str] = None
    reviewed_by: Optional[str] = None
    reviewed_on: Optional[Date] = None


class Application(DataModel):
    id: UUID
    reference_number: str
    state: ApplicationState
    person: Person
    date: Date
    is_legal_entity: bool = False
    legal_entity: Optional[str] = None
    products: List[Product] = Field(default_factory=list)
    current_review: Optional[Review] = None

    @property
    def portfolio_funds(self):
        return [fund for product in self.products for fund in product.funds]


class PendingApplicationView(DataModel):
    reference_number: str
    state: str
    full_name: str
    applied_on: Date
    support_email: str
    signature: str


class ActivatedApplicationView(PendingApplicationView):
    legal_entity: Optional[str] = None
    portfolio_funds: List[Fund] = Field(default_factory=list)
    portfolio_total_amount: Decimal = Decimal(0)


class InReviewApplicationView(ActivatedApplicationView):
    in_review_message: str
    in_review_information: Optional[Review] = None
