from sqlalchemy import Column, Float, ForeignKey, Integer
from sqlmodel import SQLModel, Field

class Holding(SQLModel, table=True):
    """Units of an asset held by a portfolio."""
    __tablename__ = "Holds"

    portfolio_id: int = Field(sa_column=Column("Portfolio_ID", Integer, ForeignKey("Portfolio.Portfolio_ID"), primary_key=True))
    asset_id: int = Field(sa_column=Column("Asset_ID", Integer, ForeignKey("Asset.Asset_ID"), primary_key=True))
    units_held: float = Field(default=0.0, sa_column=Column("Units_Held", Float, nullable=False, default=0.0))
