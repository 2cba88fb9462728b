from typing import List

from fastapi import APIRouter, Depends
from sqlmodel import Session, select

from invest_tracker.core.errors import NotFoundError
from invest_tracker.api.params import RowId
from invest_tracker.database import get_session
from invest_tracker.models.asset import Asset
from invest_tracker.schemas.asset import AssetRead

router = APIRouter(prefix="/assets", tags=["assets"])

@router.get("", response_model=List[AssetRead])
@router.get("/", response_model=List[AssetRead])
def list_assets(session: Session = Depends(get_session)):
    return session.exec(select(Asset)).all()


@router.get("/{asset_id}", response_model=AssetRead)
def get_asset(asset_id: RowId, session: Session = Depends(get_session)):
    asset = session.get(Asset, asset_id)
    if not asset:
        raise NotFoundError("Asset not found")
    return asset
