# invest_tracker/schemas/analytics.py

from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

from invest_tracker.models.enums import RiskLevel
from invest_tracker.schemas.base import ColumnModel

class DashboardRead(ColumnModel):
    portfolio_id: int
    total_investment: float
    current_value: float
    roi: float
    beta: float = 0.0
    alpha: float = 0.0
    generated_at: datetime

class DashboardGenerated(BaseModel):
    message: str
    data: Optional[DashboardRead] = None

class PortfolioPerformance(ColumnModel):
    portfolio_id: int
    portfolio_name: str
    user_name: str
    total_investment: float
    current_value: float
    roi: float
    beta: float
    alpha: float

class HighRiskUser(ColumnModel):
    name: str
    email: str
    portfolio_name: str
    risk_level: RiskLevel
    current_value: float

class SectorSummary(ColumnModel):
    sector: Optional[str] = None
    total_assets: int
    total_value: float
    avg_risk_rating: float

class UserSummary(ColumnModel):
    user_id: int
    name: str
    risk_appetite: RiskLevel
    total_portfolios: int
    total_value: float
    total_investment: float
    overall_roi: float
    total_beneficiaries: int
    total_share_per: float

class DashboardStats(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total_users: int = Field(0, alias="totalUsers")
    total_portfolios: int = Field(0, alias="totalPortfolios")
    total_assets: int = Field(0, alias="totalAssets")
    total_transactions: int = Field(0, alias="totalTransactions")
    total_value: float = Field(0.0, alias="totalValue")
    average_roi: float = Field(0.0, alias="averageROI")
