from pydantic import EmailStr, Field
from typing import Optional

from invest_tracker.models.enums import RiskLevel
from invest_tracker.schemas.base import ColumnModel

class UserCreate(ColumnModel):
    name: str = Field(min_length=1, max_length=100)
    email: EmailStr
    phone_no: Optional[str] = Field(default=None, max_length=20)
    address: Optional[str] = None
    age: Optional[int] = Field(default=None, ge=0, le=150)
    investment_goals: Optional[str] = None
    risk_appetite: RiskLevel

# Full-row replace: same fields as creation
class UserUpdate(UserCreate):
    pass

class UserRead(ColumnModel):
    user_id: int
    name: str
    email: str
    phone_no: Optional[str] = None
    address: Optional[str] = None
    age: Optional[int] = None
    investment_goals: Optional[str] = None
    risk_appetite: RiskLevel
