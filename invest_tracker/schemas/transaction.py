from datetime import date
from pydantic import BaseModel, Field

from invest_tracker.models.enums import TransactionType
from invest_tracker.schemas.base import ColumnModel

class AddTransactionRequest(BaseModel):
    portfolio_id: int
    asset_id: int
    transaction_type: TransactionType
    quantity: float = Field(gt=0)
    price_per_unit: float = Field(ge=0)
    transaction_date: date = Field(default_factory=date.today)

class TransactionRead(ColumnModel):
    transaction_id: int
    portfolio_id: int
    asset_id: int
    transaction_type: TransactionType
    quantity: float
    price_per_unit: float
    amount: float
    transaction_date: date

class TransactionWithNamesRead(TransactionRead):
    portfolio_name: str
    asset_name: str
