from typing import List

from fastapi import APIRouter, Depends
from sqlmodel import Session, select

from invest_tracker.database import get_session
from invest_tracker.models.query import Query
from invest_tracker.schemas.query import QueryRead

router = APIRouter(prefix="/queries", tags=["queries"])

@router.get("", response_model=List[QueryRead])
@router.get("/", response_model=List[QueryRead])
def list_queries(session: Session = Depends(get_session)):
    return session.exec(select(Query).order_by(Query.query_id)).all()
