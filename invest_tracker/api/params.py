# invest_tracker/api/params.py

from typing import Annotated

from fastapi import Path

# largest value a signed 64-bit INTEGER column can hold
MAX_ROW_ID = 2**63 - 1

RowId = Annotated[int, Path(ge=1, le=MAX_ROW_ID, description="Primary key of the row")]
