from datetime import date
from sqlalchemy import Column, Date, Enum, Float, ForeignKey, Integer
from sqlmodel import SQLModel, Field
from typing import Optional

from invest_tracker.models.enums import TransactionType

class Transaction(SQLModel, table=True):
    __tablename__ = "Transaction"

    transaction_id: Optional[int] = Field(default=None, sa_column=Column("Transaction_ID", Integer, primary_key=True, autoincrement=True))
    portfolio_id: int = Field(sa_column=Column("Portfolio_ID", Integer, ForeignKey("Portfolio.Portfolio_ID"), nullable=False, index=True))
    asset_id: int = Field(sa_column=Column("Asset_ID", Integer, ForeignKey("Asset.Asset_ID"), nullable=False, index=True))
    transaction_type: TransactionType = Field(sa_column=Column("Transaction_Type", Enum(TransactionType), nullable=False))
    quantity: float = Field(sa_column=Column("Quantity", Float, nullable=False))
    price_per_unit: float = Field(sa_column=Column("Price_Per_Unit", Float, nullable=False))
    # signed: positive for BUY, negative for SELL
    amount: float = Field(sa_column=Column("Amount", Float, nullable=False))
    transaction_date: date = Field(default_factory=date.today, sa_column=Column("Transaction_Date", Date, nullable=False))
