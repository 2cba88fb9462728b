from datetime import date
from sqlalchemy import Column, Date, Enum, Float, ForeignKey, Integer, String
from sqlmodel import SQLModel, Field
from typing import Optional

from invest_tracker.models.enums import RiskLevel

class Portfolio(SQLModel, table=True):
    __tablename__ = "Portfolio"

    portfolio_id: Optional[int] = Field(default=None, sa_column=Column("Portfolio_ID", Integer, primary_key=True, autoincrement=True))
    user_id: int = Field(sa_column=Column("User_ID", Integer, ForeignKey("UserProfile.User_ID"), nullable=False, index=True))
    portfolio_name: str = Field(sa_column=Column("Portfolio_Name", String(100), nullable=False))
    portfolio_type: Optional[str] = Field(default=None, sa_column=Column("Portfolio_Type", String(50)))
    creation_date: Optional[date] = Field(default=None, sa_column=Column("Creation_Date", Date))
    risk_level: RiskLevel = Field(sa_column=Column("Risk_Level", Enum(RiskLevel), nullable=False))
    strategy: Optional[str] = Field(default=None, sa_column=Column("Strategy", String(100)))
    # denormalized snapshot, revalued by add_transaction
    current_value: float = Field(default=0.0, sa_column=Column("Current_Value", Float, nullable=False, default=0.0))
