from sqlalchemy import Column, Integer, String, Text
from sqlmodel import SQLModel, Field
from typing import Optional

class Query(SQLModel, table=True):
    """Catalog entry describing one of the analytical queries the API exposes."""
    __tablename__ = "Query"

    query_id: Optional[int] = Field(default=None, sa_column=Column("Query_ID", Integer, primary_key=True, autoincrement=True))
    query_name: str = Field(sa_column=Column("Query_Name", String(100), nullable=False, unique=True))
    query_type: str = Field(sa_column=Column("Query_Type", String(50), nullable=False))  # join, nested, aggregate, procedure...
    endpoint: Optional[str] = Field(default=None, sa_column=Column("Endpoint", String(120)))
    description: Optional[str] = Field(default=None, sa_column=Column("Description", Text))
