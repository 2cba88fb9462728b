from typing import Optional

from invest_tracker.schemas.base import ColumnModel

class QueryRead(ColumnModel):
    query_id: int
    query_name: str
    query_type: str
    endpoint: Optional[str] = None
    description: Optional[str] = None
