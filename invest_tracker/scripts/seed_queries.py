import logging

from sqlmodel import Session, select

from invest_tracker.constants.queries import QUERY_CATALOG
from invest_tracker.core.logging import setup_logging
from invest_tracker.database import create_db_and_tables, engine
from invest_tracker.models.query import Query

logger = logging.getLogger(__name__)

def seed_queries(session: Session) -> int:
    """Insert the catalog entries that are missing. Returns how many were added."""
    added = 0
    for entry in QUERY_CATALOG:
        existing = session.exec(
            select(Query).where(Query.query_name == entry["query_name"])
        ).first()
        if not existing:
            session.add(Query(**entry))
            added += 1
            logger.info("Added query %s", entry["query_name"])
    session.commit()
    return added

if __name__ == "__main__":
    setup_logging()
    create_db_and_tables()
    with Session(engine) as session:
        count = seed_queries(session)
    print(f"✅ Query catalog seeded ({count} new entries).")
