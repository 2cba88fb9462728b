from sqlmodel import SQLModel
from invest_tracker.database import create_db_and_tables, engine, import_models

import_models()
SQLModel.metadata.drop_all(engine)
create_db_and_tables()

print("✅ Database reset: tables and trigger recreated.")
