from pydantic import BaseModel, Field
from typing import Optional

from invest_tracker.schemas.base import ColumnModel

class BeneficiaryCreate(BaseModel):
    user_id: int
    name: str = Field(min_length=1, max_length=100)
    relationship: Optional[str] = None
    share_per: float = Field(gt=0, le=100)

class BeneficiaryRead(ColumnModel):
    beneficiary_id: int
    user_id: int
    name: str
    relationship: Optional[str] = None
    share_per: float
