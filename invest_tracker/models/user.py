from sqlalchemy import Column, Enum, Integer, String
from sqlmodel import SQLModel, Field
from typing import Optional

from invest_tracker.models.enums import RiskLevel

class UserProfile(SQLModel, table=True):
    __tablename__ = "UserProfile"

    user_id: Optional[int] = Field(default=None, sa_column=Column("User_ID", Integer, primary_key=True, autoincrement=True))
    name: str = Field(sa_column=Column("Name", String(100), nullable=False))
    email: str = Field(sa_column=Column("Email", String(120), nullable=False, unique=True))
    phone_no: Optional[str] = Field(default=None, sa_column=Column("Phone_No", String(20)))
    address: Optional[str] = Field(default=None, sa_column=Column("Address", String(255)))
    age: Optional[int] = Field(default=None, sa_column=Column("Age", Integer))
    investment_goals: Optional[str] = Field(default=None, sa_column=Column("Investment_Goals", String(255)))
    risk_appetite: RiskLevel = Field(sa_column=Column("Risk_Appetite", Enum(RiskLevel), nullable=False))
