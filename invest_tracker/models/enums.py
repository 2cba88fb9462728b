from enum import Enum

class RiskLevel(str, Enum):
    Low = "Low"
    Medium = "Medium"
    High = "High"

class TransactionType(str, Enum):
    BUY = "BUY"
    SELL = "SELL"
