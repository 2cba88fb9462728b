from sqlalchemy import Column, DDL, Float, ForeignKey, Integer, String, event
from sqlmodel import SQLModel, Field
from typing import Optional

SHARE_LIMIT_MESSAGE = "Total beneficiary share for a user cannot exceed 100 percent"

# The share total is enforced by the database, never by the API layer.
SHARE_TRIGGER_DDL = {
    "sqlite": f"""
CREATE TRIGGER validate_beneficiary_share
BEFORE INSERT ON Beneficiary
FOR EACH ROW
WHEN (SELECT COALESCE(SUM(Share_Per), 0) FROM Beneficiary WHERE User_ID = NEW.User_ID) + NEW.Share_Per > 100
BEGIN
    SELECT RAISE(ABORT, '{SHARE_LIMIT_MESSAGE}');
END
""",
    "mysql": f"""
CREATE TRIGGER validate_beneficiary_share
BEFORE INSERT ON Beneficiary
FOR EACH ROW
BEGIN
    IF (SELECT COALESCE(SUM(Share_Per), 0) FROM Beneficiary WHERE User_ID = NEW.User_ID) + NEW.Share_Per > 100 THEN
        SIGNAL SQLSTATE '45000' SET MESSAGE_TEXT = '{SHARE_LIMIT_MESSAGE}';
    END IF;
END
""",
}
# MariaDB accepts the MySQL trigger syntax but reports its own dialect name
SHARE_TRIGGER_DDL["mariadb"] = SHARE_TRIGGER_DDL["mysql"]


class Beneficiary(SQLModel, table=True):
    __tablename__ = "Beneficiary"

    beneficiary_id: Optional[int] = Field(default=None, sa_column=Column("Beneficiary_ID", Integer, primary_key=True, autoincrement=True))
    user_id: int = Field(sa_column=Column("User_ID", Integer, ForeignKey("UserProfile.User_ID"), nullable=False, index=True))
    name: str = Field(sa_column=Column("Name", String(100), nullable=False))
    relationship: Optional[str] = Field(default=None, sa_column=Column("Relationship", String(50)))
    share_per: float = Field(sa_column=Column("Share_Per", Float, nullable=False))


for _dialect, _ddl in SHARE_TRIGGER_DDL.items():
    event.listen(
        Beneficiary.__table__,
        "after_create",
        DDL(_ddl).execute_if(dialect=_dialect),
    )
