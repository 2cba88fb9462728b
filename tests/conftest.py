"""Shared fixtures: an in-memory SQLite store (share trigger included) behind the API."""

import os
from datetime import date

os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from invest_tracker.database import get_session, import_models
from invest_tracker.main import app
from invest_tracker.models.asset import Asset
from invest_tracker.models.enums import RiskLevel, TransactionType
from invest_tracker.models.holding import Holding
from invest_tracker.models.portfolio import Portfolio
from invest_tracker.models.transaction import Transaction
from invest_tracker.models.user import UserProfile


@pytest.fixture
def engine():
    import_models()
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def client(engine):
    def override_get_session():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(session):
    def _make_user(name="Alice", email=None, risk_appetite=RiskLevel.Medium, **kwargs):
        user = UserProfile(
            name=name,
            email=email or f"{name.lower().replace(' ', '.')}@example.com",
            risk_appetite=risk_appetite,
            **kwargs,
        )
        session.add(user)
        session.commit()
        session.refresh(user)
        return user
    return _make_user


@pytest.fixture
def make_portfolio(session):
    def _make_portfolio(user, name="Growth", risk_level=RiskLevel.Medium, current_value=0.0, **kwargs):
        portfolio = Portfolio(
            user_id=user.user_id,
            portfolio_name=name,
            risk_level=risk_level,
            current_value=current_value,
            creation_date=date(2024, 1, 1),
            **kwargs,
        )
        session.add(portfolio)
        session.commit()
        session.refresh(portfolio)
        return portfolio
    return _make_portfolio


@pytest.fixture
def make_asset(session):
    def _make_asset(name="Acme Corp", sector="Technology", market_price=100.0, risk_rating=5.0, **kwargs):
        asset = Asset(asset_name=name, sector=sector, market_price=market_price, risk_rating=risk_rating, **kwargs)
        session.add(asset)
        session.commit()
        session.refresh(asset)
        return asset
    return _make_asset


@pytest.fixture
def make_holding(session):
    def _make_holding(portfolio, asset, units_held):
        holding = Holding(portfolio_id=portfolio.portfolio_id, asset_id=asset.asset_id, units_held=units_held)
        session.add(holding)
        session.commit()
        return holding
    return _make_holding


@pytest.fixture
def make_transaction(session):
    def _make_transaction(portfolio, asset, amount, transaction_type=TransactionType.BUY,
                          quantity=1.0, transaction_date=date(2024, 2, 1)):
        transaction = Transaction(
            portfolio_id=portfolio.portfolio_id,
            asset_id=asset.asset_id,
            transaction_type=transaction_type,
            quantity=quantity,
            price_per_unit=abs(amount) / quantity,
            amount=amount,
            transaction_date=transaction_date,
        )
        session.add(transaction)
        session.commit()
        session.refresh(transaction)
        return transaction
    return _make_transaction
