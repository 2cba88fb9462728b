from sqlalchemy import Column, Float, Integer, String
from sqlmodel import SQLModel, Field
from typing import Optional

class Asset(SQLModel, table=True):
    __tablename__ = "Asset"

    asset_id: Optional[int] = Field(default=None, sa_column=Column("Asset_ID", Integer, primary_key=True, autoincrement=True))
    asset_name: str = Field(sa_column=Column("Asset_Name", String(100), nullable=False))
    asset_type: Optional[str] = Field(default=None, sa_column=Column("Asset_Type", String(50)))  # stock, bond, fund, crypto
    ticker_symbol: Optional[str] = Field(default=None, sa_column=Column("Ticker_Symbol", String(20)))
    sector: Optional[str] = Field(default=None, sa_column=Column("Sector", String(50), index=True))
    market_price: float = Field(default=0.0, sa_column=Column("Market_Price", Float, nullable=False, default=0.0))
    risk_rating: Optional[float] = Field(default=None, sa_column=Column("Risk_Rating", Float))
