from datetime import datetime, timezone
from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer
from sqlmodel import SQLModel, Field
from typing import Optional

class PortfolioDashboard(SQLModel, table=True):
    """Snapshot written by generate_dashboard; stale until regenerated."""
    __tablename__ = "PortfolioDashboard"

    portfolio_id: int = Field(sa_column=Column("Portfolio_ID", Integer, ForeignKey("Portfolio.Portfolio_ID"), primary_key=True))
    total_investment: float = Field(default=0.0, sa_column=Column("Total_Investment", Float, nullable=False, default=0.0))
    current_value: float = Field(default=0.0, sa_column=Column("Current_Value", Float, nullable=False, default=0.0))
    roi: float = Field(default=0.0, sa_column=Column("ROI", Float, nullable=False, default=0.0))
    beta: Optional[float] = Field(default=None, sa_column=Column("Beta", Float))
    alpha: Optional[float] = Field(default=None, sa_column=Column("Alpha", Float))
    generated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), sa_column=Column("Generated_At", DateTime(timezone=True), nullable=False))
