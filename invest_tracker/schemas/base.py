# invest_tracker/schemas/base.py

from pydantic import BaseModel, ConfigDict

_ACRONYMS = {"id": "ID", "roi": "ROI"}


def to_column_name(field_name: str) -> str:
    """portfolio_id -> Portfolio_ID, share_per -> Share_Per"""
    return "_".join(_ACRONYMS.get(part, part.capitalize()) for part in field_name.split("_"))


class ColumnModel(BaseModel):
    """Body whose JSON keys follow the table's column names."""

    model_config = ConfigDict(
        alias_generator=to_column_name,
        populate_by_name=True,
        from_attributes=True,
    )
