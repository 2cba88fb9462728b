# invest_tracker/utils/metrics.py
"""
Derived portfolio metrics: Total Investment, ROI and the analytics listings.

Every aggregate coalesces to 0 so a missing row (no BUY transactions, no
dashboard yet, empty store) never reaches a response as null.
"""

from typing import List, Optional

from sqlalchemy import func
from sqlmodel import Session, select

from invest_tracker.models.asset import Asset
from invest_tracker.models.dashboard import PortfolioDashboard
from invest_tracker.models.enums import RiskLevel, TransactionType
from invest_tracker.models.holding import Holding
from invest_tracker.models.portfolio import Portfolio
from invest_tracker.models.transaction import Transaction
from invest_tracker.models.user import UserProfile
from invest_tracker.schemas.analytics import (
    DashboardStats,
    HighRiskUser,
    PortfolioPerformance,
    SectorSummary,
)


def calc_roi(total_investment: Optional[float], current_value: Optional[float]) -> float:
    """ROI in percent, rounded to 2 places; 0 when nothing was invested."""
    total_investment = total_investment or 0
    current_value = current_value or 0
    if total_investment > 0:
        return round(((current_value - total_investment) / total_investment) * 100, 2)
    return 0.0


def get_total_investment(session: Session, portfolio_id: int) -> float:
    total = session.exec(
        select(func.coalesce(func.sum(Transaction.amount), 0))
        .where(
            Transaction.portfolio_id == portfolio_id,
            Transaction.transaction_type == TransactionType.BUY,
        )
    ).one()
    return float(total or 0)


def get_current_value(session: Session, portfolio_id: int) -> float:
    value = session.exec(
        select(Portfolio.current_value).where(Portfolio.portfolio_id == portfolio_id)
    ).first()
    return float(value or 0)


def get_risk_by_portfolio(session: Session, portfolio_id: int) -> Optional[RiskLevel]:
    """Risk appetite of the user owning the portfolio, None if it does not exist."""
    return session.exec(
        select(UserProfile.risk_appetite)
        .select_from(UserProfile)
        .join(Portfolio, Portfolio.user_id == UserProfile.user_id)
        .where(Portfolio.portfolio_id == portfolio_id)
    ).first()


def portfolio_performance(session: Session) -> List[PortfolioPerformance]:
    invested = (
        select(
            Transaction.portfolio_id.label("portfolio_id"),
            func.sum(Transaction.amount).label("total"),
        )
        .where(Transaction.transaction_type == TransactionType.BUY)
        .group_by(Transaction.portfolio_id)
        .subquery()
    )

    rows = session.exec(
        select(
            Portfolio.portfolio_id,
            Portfolio.portfolio_name,
            UserProfile.name,
            Portfolio.current_value,
            invested.c.total,
            PortfolioDashboard.beta,
            PortfolioDashboard.alpha,
        )
        .select_from(Portfolio)
        .join(UserProfile, Portfolio.user_id == UserProfile.user_id)
        .outerjoin(PortfolioDashboard, PortfolioDashboard.portfolio_id == Portfolio.portfolio_id)
        .outerjoin(invested, invested.c.portfolio_id == Portfolio.portfolio_id)
    ).all()

    performance = []
    for portfolio_id, portfolio_name, user_name, current_value, total, beta, alpha in rows:
        total_investment = float(total or 0)
        current_value = float(current_value or 0)
        performance.append(
            PortfolioPerformance(
                portfolio_id=portfolio_id,
                portfolio_name=portfolio_name,
                user_name=user_name,
                total_investment=total_investment,
                current_value=current_value,
                roi=calc_roi(total_investment, current_value),
                beta=float(beta or 0),
                alpha=float(alpha or 0),
            )
        )

    # sorted() is stable: ties keep database order
    return sorted(performance, key=lambda row: row.roi, reverse=True)


def high_risk_users(session: Session) -> List[HighRiskUser]:
    """(user, portfolio) pairs where both the portfolio and its owner are High risk."""
    rows = session.exec(
        select(
            UserProfile.name,
            UserProfile.email,
            Portfolio.portfolio_name,
            Portfolio.risk_level,
            Portfolio.current_value,
        )
        .select_from(UserProfile)
        .join(Portfolio, Portfolio.user_id == UserProfile.user_id)
        .where(
            Portfolio.risk_level == RiskLevel.High,
            UserProfile.risk_appetite == RiskLevel.High,
        )
    ).all()

    return [
        HighRiskUser(
            name=name,
            email=email,
            portfolio_name=portfolio_name,
            risk_level=risk_level,
            current_value=float(current_value or 0),
        )
        for name, email, portfolio_name, risk_level, current_value in rows
    ]


def sector_summary(session: Session) -> List[SectorSummary]:
    total_value = func.sum(Holding.units_held * Asset.market_price).label("total_value")
    rows = session.exec(
        select(
            Asset.sector,
            func.count(func.distinct(Holding.asset_id)),
            total_value,
            func.avg(Asset.risk_rating),
        )
        .select_from(Asset)
        .join(Holding, Holding.asset_id == Asset.asset_id)
        .group_by(Asset.sector)
        .order_by(total_value.desc())
    ).all()

    return [
        SectorSummary(
            sector=sector,
            total_assets=int(total_assets or 0),
            total_value=float(value or 0),
            avg_risk_rating=float(avg_risk or 0),
        )
        for sector, total_assets, value, avg_risk in rows
    ]


def dashboard_stats(session: Session) -> DashboardStats:
    def count(model) -> int:
        return int(session.exec(select(func.count()).select_from(model)).one() or 0)

    total_value = session.exec(select(func.coalesce(func.sum(Portfolio.current_value), 0))).one()
    average_roi = session.exec(select(func.coalesce(func.avg(PortfolioDashboard.roi), 0))).one()

    return DashboardStats(
        total_users=count(UserProfile),
        total_portfolios=count(Portfolio),
        total_assets=count(Asset),
        total_transactions=count(Transaction),
        total_value=float(total_value or 0),
        average_roi=float(average_roi or 0),
    )
