"""Transaction data model"""

import datetime
import uuid

from pydantic import BaseModel, Field, field_validator

from transact.constants import TransactionType, AMOUNT_DECIMAL_PLACES, MAX_AMOUNT
from .person import Person


class TransactionId(BaseModel):
    """Generated transaction identifier. Every instance is freshly minted."""

    value: str = Field(default_factory=lambda: uuid.uuid4().hex, description="Identifier value")

    class Config:
        frozen = True

    def __str__(self) -> str:
        return self.value


class Transaction(BaseModel):
    """Transaction entity"""

    transaction_id: TransactionId = Field(default_factory=TransactionId, description="Generated identifier")
    type: TransactionType = Field(..., description="Expense or revenue")
    description: str = Field(..., min_length=1, description="What the transaction was for")
    amount: float = Field(..., gt=0, le=MAX_AMOUNT, allow_inf_nan=False, description="Transaction amount")
    date: datetime.date = Field(..., description="Transaction date")
    person: Person = Field(..., description="Staff member responsible")

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "type": "E",
                "description": "Office chairs",
                "amount": 420.50,
                "date": "2024-03-14",
                "person": {
                    "employee_id": 1001,
                    "name": "Alex Yeoh",
                    "phone": "87438807",
                    "email": "alexyeoh@example.com"
                }
            }
        }

    @field_validator("description")
    @classmethod
    def _description_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Description must not be blank")
        return value

    @field_validator("amount")
    @classmethod
    def _round_amount(cls, value: float) -> float:
        return round(value, AMOUNT_DECIMAL_PLACES)

    def is_same_entry(self, other: "Transaction") -> bool:
        """
        Returns True if both transactions record the same thing.

        Every field except the generated identifier takes part; the staff
        member is compared by person sameness and amounts are compared at
        AMOUNT_DECIMAL_PLACES precision.
        """
        if other is self:
            return True
        if not isinstance(other, Transaction):
            return False
        return (
            other.type == self.type
            and other.description == self.description
            and round(other.amount, AMOUNT_DECIMAL_PLACES) == round(self.amount, AMOUNT_DECIMAL_PLACES)
            and other.date == self.date
            and other.person.is_same_entry(self.person)
        )
