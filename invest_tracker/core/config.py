import os
from dotenv import load_dotenv

load_dotenv()  # loads .env into the environment

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./invest_tracker.db")
SQL_ECHO = os.getenv("SQL_ECHO", "false").lower() in ("1", "true", "yes")

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",")
    if origin.strip()
]

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Dashboard generation
BENCHMARK_RETURN = float(os.getenv("BENCHMARK_RETURN", "8.0"))  # annual %, used for Alpha
MARKET_RISK_RATING = float(os.getenv("MARKET_RISK_RATING", "5.0"))  # rating that maps to Beta = 1
