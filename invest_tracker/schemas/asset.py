from typing import Optional

from invest_tracker.schemas.base import ColumnModel

class AssetRead(ColumnModel):
    asset_id: int
    asset_name: str
    asset_type: Optional[str] = None
    ticker_symbol: Optional[str] = None
    sector: Optional[str] = None
    market_price: float
    risk_rating: Optional[float] = None
