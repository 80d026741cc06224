"""
Financial Calculation Engine

Pure formula modules for the five calculators. Nothing here holds state;
statement results are written into a caller-supplied FinancialSnapshot.
"""

from app.calculations import statements, ratios, breakeven, interest, formatting
from app.calculations.validation import ValidationError

__all__ = [
    "statements",
    "ratios",
    "breakeven",
    "interest",
    "formatting",
    "ValidationError",
]
