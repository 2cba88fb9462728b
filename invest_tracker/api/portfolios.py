# invest_tracker/api/portfolios.py

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy import delete, update
from sqlmodel import Session, select

from invest_tracker.api.params import RowId
from invest_tracker.core.errors import NotFoundError
from invest_tracker.database import get_session
from invest_tracker.models.portfolio import Portfolio
from invest_tracker.models.user import UserProfile
from invest_tracker.schemas.portfolio import (
    PortfolioCreate,
    PortfolioRead,
    PortfolioRiskRead,
    PortfolioRoiRead,
    PortfolioUpdate,
    PortfolioWithOwnerRead,
    TotalInvestmentRead,
)
from invest_tracker.utils.metrics import calc_roi, get_current_value, get_risk_by_portfolio, get_total_investment

router = APIRouter(prefix="/portfolios", tags=["portfolios"])

@router.get("", response_model=List[PortfolioWithOwnerRead])
@router.get("/", response_model=List[PortfolioWithOwnerRead])
def list_portfolios(session: Session = Depends(get_session)):
    rows = session.exec(
        select(Portfolio, UserProfile.name)
        .join(UserProfile, Portfolio.user_id == UserProfile.user_id)
    ).all()
    return [
        PortfolioWithOwnerRead(**portfolio.model_dump(), user_name=user_name)
        for portfolio, user_name in rows
    ]


@router.get("/{portfolio_id}", response_model=PortfolioRead)
def get_portfolio(portfolio_id: RowId, session: Session = Depends(get_session)):
    portfolio = session.get(Portfolio, portfolio_id)
    if not portfolio:
        raise NotFoundError("Portfolio not found")
    return portfolio


@router.post("")
@router.post("/")
def create_portfolio(portfolio_data: PortfolioCreate, session: Session = Depends(get_session)):
    portfolio = Portfolio(**portfolio_data.model_dump())
    session.add(portfolio)
    session.commit()
    session.refresh(portfolio)
    return {"message": "Portfolio created successfully", "id": portfolio.portfolio_id}


@router.put("/{portfolio_id}")
def update_portfolio(portfolio_id: RowId, portfolio_data: PortfolioUpdate, session: Session = Depends(get_session)):
    session.exec(
        update(Portfolio)
        .where(Portfolio.portfolio_id == portfolio_id)
        .values(**portfolio_data.model_dump())
    )
    session.commit()
    return {"message": "Portfolio updated successfully"}


@router.delete("/{portfolio_id}")
def delete_portfolio(portfolio_id: RowId, session: Session = Depends(get_session)):
    session.exec(delete(Portfolio).where(Portfolio.portfolio_id == portfolio_id))
    session.commit()
    return {"message": "Portfolio deleted successfully"}


@router.get("/{portfolio_id}/total-investment", response_model=TotalInvestmentRead)
def total_investment(portfolio_id: RowId, session: Session = Depends(get_session)):
    return TotalInvestmentRead(total_investment=get_total_investment(session, portfolio_id))


@router.get("/{portfolio_id}/roi", response_model=PortfolioRoiRead)
def portfolio_roi(portfolio_id: RowId, session: Session = Depends(get_session)):
    invested = get_total_investment(session, portfolio_id)
    current_value = get_current_value(session, portfolio_id)
    return PortfolioRoiRead(
        total_investment=invested,
        current_value=current_value,
        roi=calc_roi(invested, current_value),
    )


@router.get("/{portfolio_id}/risk", response_model=PortfolioRiskRead)
def portfolio_risk(portfolio_id: RowId, session: Session = Depends(get_session)):
    return PortfolioRiskRead(risk_appetite=get_risk_by_portfolio(session, portfolio_id))
