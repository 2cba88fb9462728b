# invest_tracker/api/transactions.py

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy import delete
from sqlmodel import Session, select

from invest_tracker.api.params import RowId
from invest_tracker.core.errors import NotFoundError
from invest_tracker.database import get_session
from invest_tracker.models.asset import Asset
from invest_tracker.models.portfolio import Portfolio
from invest_tracker.models.transaction import Transaction
from invest_tracker.schemas.transaction import TransactionRead, TransactionWithNamesRead

router = APIRouter(prefix="/transactions", tags=["transactions"])

@router.get("", response_model=List[TransactionWithNamesRead])
@router.get("/", response_model=List[TransactionWithNamesRead])
def list_transactions(session: Session = Depends(get_session)):
    """Transactions with their portfolio and asset names, newest first."""
    rows = session.exec(
        select(Transaction, Portfolio.portfolio_name, Asset.asset_name)
        .join(Portfolio, Transaction.portfolio_id == Portfolio.portfolio_id)
        .join(Asset, Transaction.asset_id == Asset.asset_id)
        .order_by(Transaction.transaction_date.desc(), Transaction.transaction_id.desc())
    ).all()
    return [
        TransactionWithNamesRead(**transaction.model_dump(), portfolio_name=portfolio_name, asset_name=asset_name)
        for transaction, portfolio_name, asset_name in rows
    ]


@router.get("/{transaction_id}", response_model=TransactionRead)
def get_transaction(transaction_id: RowId, session: Session = Depends(get_session)):
    transaction = session.get(Transaction, transaction_id)
    if not transaction:
        raise NotFoundError("Transaction not found")
    return transaction


@router.delete("/{transaction_id}")
def delete_transaction(transaction_id: RowId, session: Session = Depends(get_session)):
    # holdings are not rewound: the row is removed as-is
    session.exec(delete(Transaction).where(Transaction.transaction_id == transaction_id))
    session.commit()
    return {"message": "Transaction deleted successfully"}
