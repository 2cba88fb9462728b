from datetime import date
from pydantic import Field
from typing import Optional

from invest_tracker.models.enums import RiskLevel
from invest_tracker.schemas.base import ColumnModel

class PortfolioCreate(ColumnModel):
    user_id: int
    portfolio_name: str = Field(min_length=1, max_length=100)
    portfolio_type: Optional[str] = None
    creation_date: date = Field(default_factory=date.today)
    risk_level: RiskLevel
    strategy: Optional[str] = None
    current_value: float = Field(default=0.0, ge=0)

class PortfolioUpdate(ColumnModel):
    portfolio_name: str = Field(min_length=1, max_length=100)
    portfolio_type: Optional[str] = None
    risk_level: RiskLevel
    strategy: Optional[str] = None
    current_value: float = Field(ge=0)

class PortfolioRead(ColumnModel):
    portfolio_id: int
    user_id: int
    portfolio_name: str
    portfolio_type: Optional[str] = None
    creation_date: Optional[date] = None
    risk_level: RiskLevel
    strategy: Optional[str] = None
    current_value: float

class PortfolioWithOwnerRead(PortfolioRead):
    user_name: str

class TotalInvestmentRead(ColumnModel):
    total_investment: float

class PortfolioRoiRead(ColumnModel):
    total_investment: float
    current_value: float
    roi: float

class RoiRead(ColumnModel):
    roi: float

class PortfolioRiskRead(ColumnModel):
    risk_appetite: Optional[RiskLevel] = None
