import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from invest_tracker.api import advanced, assets, portfolios, queries, transactions, users
from invest_tracker.core.config import CORS_ORIGINS
from invest_tracker.core.errors import database_error_message, register_exception_handlers
from invest_tracker.core.logging import setup_logging
from invest_tracker.database import create_db_and_tables, get_session

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    create_db_and_tables()
    logger.info("Database tables ready")
    yield

app = FastAPI(title="Personal Investment Management System API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(users.router, prefix="/api")
app.include_router(portfolios.router, prefix="/api")
app.include_router(assets.router, prefix="/api")
app.include_router(transactions.router, prefix="/api")
app.include_router(queries.router, prefix="/api")
app.include_router(advanced.router, prefix="/api")

@app.get("/")
def root():
    return {"message": "Personal Investment Management System API"}

@app.get("/api/test-db")
def test_db(session: Session = Depends(get_session)):
    try:
        solution = session.exec(text("SELECT 1 + 1 AS solution")).scalar_one()
    except SQLAlchemyError as exc:
        logger.error("Database connectivity check failed: %s", exc)
        return JSONResponse(
            status_code=500,
            content={"error": "Database connection failed: " + database_error_message(exc)},
        )
    return {"message": "Database connected successfully", "result": solution}
