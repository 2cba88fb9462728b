# invest_tracker/utils/routines.py
"""
Multi-statement routines. Each one runs as a single unit of work: it
commits once at the end, and any failure leaves the store untouched.
"""

import logging
from datetime import date, datetime, timezone

from sqlalchemy import func
from sqlmodel import Session, select

from invest_tracker.core import config
from invest_tracker.core.errors import DataStoreError, NotFoundError
from invest_tracker.models.asset import Asset
from invest_tracker.models.beneficiary import Beneficiary
from invest_tracker.models.dashboard import PortfolioDashboard
from invest_tracker.models.enums import TransactionType
from invest_tracker.models.holding import Holding
from invest_tracker.models.portfolio import Portfolio
from invest_tracker.models.transaction import Transaction
from invest_tracker.models.user import UserProfile
from invest_tracker.schemas.analytics import UserSummary
from invest_tracker.utils.metrics import calc_roi, get_total_investment

logger = logging.getLogger(__name__)

EPS = 1e-9  # leftover units treated as a fully sold position


def revalue_portfolio(session: Session, portfolio: Portfolio) -> float:
    """Set Current_Value to the market value of the portfolio's holdings."""
    value = session.exec(
        select(func.coalesce(func.sum(Holding.units_held * Asset.market_price), 0))
        .select_from(Holding)
        .join(Asset, Asset.asset_id == Holding.asset_id)
        .where(Holding.portfolio_id == portfolio.portfolio_id)
    ).one()
    portfolio.current_value = float(value or 0)
    session.add(portfolio)
    return portfolio.current_value


def add_transaction(
    session: Session,
    portfolio_id: int,
    asset_id: int,
    transaction_type: TransactionType,
    quantity: float,
    price_per_unit: float,
    transaction_date: date,
) -> Transaction:
    # row locks serialize concurrent trades on the same portfolio; a locked
    # rows are re-read even when this session already loaded them
    portfolio = session.get(Portfolio, portfolio_id, with_for_update=True, populate_existing=True)
    if not portfolio:
        raise DataStoreError(f"Portfolio {portfolio_id} does not exist")
    if not session.get(Asset, asset_id):
        raise DataStoreError(f"Asset {asset_id} does not exist")

    holding = session.get(
        Holding, (portfolio_id, asset_id), with_for_update=True, populate_existing=True
    )
    gross = quantity * price_per_unit

    if transaction_type == TransactionType.BUY:
        if holding is None:
            holding = Holding(portfolio_id=portfolio_id, asset_id=asset_id, units_held=0.0)
        holding.units_held += quantity
        session.add(holding)
        amount = gross
    else:
        units_held = holding.units_held if holding else 0.0
        if units_held < quantity:
            raise DataStoreError(
                f"Insufficient units: portfolio {portfolio_id} holds {units_held:g} of asset {asset_id}, cannot sell {quantity:g}"
            )
        holding.units_held -= quantity
        if holding.units_held <= EPS:
            session.delete(holding)
        else:
            session.add(holding)
        amount = -gross

    transaction = Transaction(
        portfolio_id=portfolio_id,
        asset_id=asset_id,
        transaction_type=transaction_type,
        quantity=quantity,
        price_per_unit=price_per_unit,
        amount=amount,
        transaction_date=transaction_date,
    )
    session.add(transaction)
    session.flush()

    revalue_portfolio(session, portfolio)
    session.commit()
    session.refresh(transaction)

    logger.info(
        "%s %g x asset %s recorded for portfolio %s (amount %.2f)",
        transaction_type.value, quantity, asset_id, portfolio_id, amount,
    )
    return transaction


def generate_dashboard(session: Session, portfolio_id: int) -> PortfolioDashboard:
    """
    Rewrite the dashboard row of a portfolio.

    Beta is the value-weighted risk rating of the holdings relative to
    MARKET_RISK_RATING; Alpha is the ROI in excess of Beta times the
    benchmark return.
    """
    portfolio = session.get(Portfolio, portfolio_id)
    if not portfolio:
        raise DataStoreError(f"Portfolio {portfolio_id} does not exist")

    total_investment = get_total_investment(session, portfolio_id)
    current_value = float(portfolio.current_value or 0)
    roi = calc_roi(total_investment, current_value)

    position_value = Holding.units_held * Asset.market_price
    weighted_risk, market_value = session.exec(
        select(
            func.coalesce(func.sum(position_value * func.coalesce(Asset.risk_rating, 0)), 0),
            func.coalesce(func.sum(position_value), 0),
        )
        .select_from(Holding)
        .join(Asset, Asset.asset_id == Holding.asset_id)
        .where(Holding.portfolio_id == portfolio_id)
    ).one()

    beta = 0.0
    if market_value and config.MARKET_RISK_RATING:
        beta = round((weighted_risk / market_value) / config.MARKET_RISK_RATING, 4)
    alpha = round(roi - beta * config.BENCHMARK_RETURN, 2)

    dashboard = session.get(PortfolioDashboard, portfolio_id)
    if dashboard is None:
        dashboard = PortfolioDashboard(portfolio_id=portfolio_id)
    dashboard.total_investment = total_investment
    dashboard.current_value = current_value
    dashboard.roi = roi
    dashboard.beta = beta
    dashboard.alpha = alpha
    dashboard.generated_at = datetime.now(timezone.utc)

    session.add(dashboard)
    session.commit()
    session.refresh(dashboard)

    logger.info("Dashboard generated for portfolio %s: ROI=%s beta=%s alpha=%s", portfolio_id, roi, beta, alpha)
    return dashboard


def user_summary(session: Session, user_id: int) -> UserSummary:
    user = session.get(UserProfile, user_id)
    if not user:
        raise NotFoundError("User not found")

    total_portfolios, total_value = session.exec(
        select(func.count(Portfolio.portfolio_id), func.coalesce(func.sum(Portfolio.current_value), 0))
        .where(Portfolio.user_id == user_id)
    ).one()

    total_investment = session.exec(
        select(func.coalesce(func.sum(Transaction.amount), 0))
        .select_from(Transaction)
        .join(Portfolio, Portfolio.portfolio_id == Transaction.portfolio_id)
        .where(
            Portfolio.user_id == user_id,
            Transaction.transaction_type == TransactionType.BUY,
        )
    ).one()

    total_beneficiaries, total_share = session.exec(
        select(func.count(Beneficiary.beneficiary_id), func.coalesce(func.sum(Beneficiary.share_per), 0))
        .where(Beneficiary.user_id == user_id)
    ).one()

    total_value = float(total_value or 0)
    total_investment = float(total_investment or 0)
    return UserSummary(
        user_id=user.user_id,
        name=user.name,
        risk_appetite=user.risk_appetite,
        total_portfolios=int(total_portfolios or 0),
        total_value=total_value,
        total_investment=total_investment,
        overall_roi=calc_roi(total_investment, total_value),
        total_beneficiaries=int(total_beneficiaries or 0),
        total_share_per=float(total_share or 0),
    )
