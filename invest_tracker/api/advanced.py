# invest_tracker/api/advanced.py

from typing import List

from fastapi import APIRouter, Depends
from sqlmodel import Session, select

from invest_tracker.api.params import RowId
from invest_tracker.database import get_session
from invest_tracker.models.beneficiary import Beneficiary
from invest_tracker.schemas.analytics import (
    DashboardGenerated,
    DashboardRead,
    DashboardStats,
    HighRiskUser,
    PortfolioPerformance,
    SectorSummary,
    UserSummary,
)
from invest_tracker.schemas.beneficiary import BeneficiaryCreate, BeneficiaryRead
from invest_tracker.schemas.portfolio import RoiRead, TotalInvestmentRead
from invest_tracker.schemas.transaction import AddTransactionRequest
from invest_tracker.utils import metrics, routines

router = APIRouter(prefix="/advanced", tags=["advanced"])

@router.post("/add-transaction")
def add_transaction(request: AddTransactionRequest, session: Session = Depends(get_session)):
    routines.add_transaction(
        session,
        portfolio_id=request.portfolio_id,
        asset_id=request.asset_id,
        transaction_type=request.transaction_type,
        quantity=request.quantity,
        price_per_unit=request.price_per_unit,
        transaction_date=request.transaction_date,
    )
    return {"message": "Transaction added successfully via stored procedure"}


@router.post("/generate-dashboard/{portfolio_id}", response_model=DashboardGenerated)
def generate_dashboard(portfolio_id: RowId, session: Session = Depends(get_session)):
    dashboard = routines.generate_dashboard(session, portfolio_id)
    return DashboardGenerated(
        message="Dashboard generated successfully",
        data=DashboardRead.model_validate(dashboard),
    )


@router.get("/user-summary/{user_id}", response_model=UserSummary)
def user_summary(user_id: RowId, session: Session = Depends(get_session)):
    return routines.user_summary(session, user_id)


@router.get("/portfolio-performance", response_model=List[PortfolioPerformance])
def portfolio_performance(session: Session = Depends(get_session)):
    """Every portfolio with owner, Total Investment, ROI, Beta and Alpha; best ROI first."""
    return metrics.portfolio_performance(session)


@router.get("/high-risk-users", response_model=List[HighRiskUser])
def high_risk_users(session: Session = Depends(get_session)):
    return metrics.high_risk_users(session)


@router.get("/sector-summary", response_model=List[SectorSummary])
def sector_summary(session: Session = Depends(get_session)):
    return metrics.sector_summary(session)


def _insert_beneficiary(session: Session, beneficiary_data: BeneficiaryCreate) -> dict:
    # the share-total trigger rejects the insert; the error handler reports it
    session.add(Beneficiary(**beneficiary_data.model_dump()))
    session.commit()
    return {"message": "Beneficiary added successfully"}


@router.post("/test-trigger")
def test_trigger(beneficiary_data: BeneficiaryCreate, session: Session = Depends(get_session)):
    return _insert_beneficiary(session, beneficiary_data)


@router.post("/test-beneficiary-trigger")
def test_beneficiary_trigger(beneficiary_data: BeneficiaryCreate, session: Session = Depends(get_session)):
    return _insert_beneficiary(session, beneficiary_data)


@router.get("/beneficiaries/{user_id}", response_model=List[BeneficiaryRead])
def list_beneficiaries(user_id: RowId, session: Session = Depends(get_session)):
    return session.exec(
        select(Beneficiary)
        .where(Beneficiary.user_id == user_id)
        .order_by(Beneficiary.beneficiary_id)
    ).all()


@router.get("/test-function/{portfolio_id}", response_model=TotalInvestmentRead)
def test_function(portfolio_id: RowId, session: Session = Depends(get_session)):
    return TotalInvestmentRead(total_investment=metrics.get_total_investment(session, portfolio_id))


@router.get("/test-roi/{portfolio_id}", response_model=RoiRead)
def test_roi(portfolio_id: RowId, session: Session = Depends(get_session)):
    roi = metrics.calc_roi(
        metrics.get_total_investment(session, portfolio_id),
        metrics.get_current_value(session, portfolio_id),
    )
    return RoiRead(roi=roi)


@router.get("/dashboard-stats", response_model=DashboardStats)
def dashboard_stats(session: Session = Depends(get_session)):
    return metrics.dashboard_stats(session)
