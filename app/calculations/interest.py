"""
Compound Interest Calculations

Future value of a lump sum compounded n times per year plus a stream of
monthly contributions treated as an ordinary annuity (always compounded
monthly, whatever the principal's compounding frequency).
"""

import math
from dataclasses import dataclass
from typing import List, Dict, Optional, Tuple

from app.calculations.validation import (
    NON_NEGATIVE_MESSAGE,
    ValidationError,
    require_finite,
)

MONTHS_PER_YEAR = 12
MAX_SCHEDULE_YEARS = 1000


@dataclass
class CompoundInterestResult:
    """Future value breakdown for a savings plan."""

    future_value: float
    interest_earned: float
    total_invested: float
    future_value_principal: float
    future_value_contributions: float


def _validate(
    principal: float,
    annual_rate_percent: float,
    years: float,
    compounding_frequency: int,
    monthly_contribution: float,
) -> None:
    require_finite([principal, annual_rate_percent, years, monthly_contribution])
    if (
        principal < 0
        or annual_rate_percent < 0
        or years < 0
        or compounding_frequency <= 0
        or monthly_contribution < 0
    ):
        raise ValidationError(NON_NEGATIVE_MESSAGE)


def _grow(base: float, exponent: float) -> float:
    """Raise base to exponent, saturating to infinity instead of overflowing."""
    try:
        return base ** exponent
    except OverflowError:
        return math.inf


def _rounded(value: float) -> Optional[float]:
    """Round a schedule amount; non-finite amounts become None."""
    if not math.isfinite(value):
        return None
    return round(value, 2)


def _future_values(
    principal: float,
    annual_rate: float,
    years: float,
    compounding_frequency: int,
    monthly_contribution: float,
) -> Tuple[float, float]:
    """
    Return (future value of principal, future value of contributions).

    Amounts too large for a float come back as infinity.
    """
    fv_principal = 0.0
    if principal > 0:
        fv_principal = principal * _grow(
            1 + annual_rate / compounding_frequency, compounding_frequency * years
        )

    fv_contributions = 0.0
    if monthly_contribution > 0:
        payments = years * MONTHS_PER_YEAR
        monthly_rate = annual_rate / MONTHS_PER_YEAR
        if monthly_rate == 0:
            fv_contributions = monthly_contribution * payments
        else:
            fv_contributions = monthly_contribution * (
                (_grow(1 + monthly_rate, payments) - 1) / monthly_rate
            )

    return fv_principal, fv_contributions


def compute_compound_interest(
    principal: float,
    annual_rate_percent: float,
    years: float,
    compounding_frequency: int = 12,
    monthly_contribution: float = 0.0,
) -> CompoundInterestResult:
    """
    Calculate the future value of a principal plus monthly contributions.

    Args:
        principal: Initial deposit
        annual_rate_percent: Annual interest rate in percent (e.g., 5 for 5%)
        years: Investment horizon in years
        compounding_frequency: Compounding periods per year for the principal
        monthly_contribution: Amount added at the end of every month

    Returns:
        CompoundInterestResult

    Raises:
        ValidationError: If any amount is negative or the compounding
            frequency is not positive
    """
    _validate(
        principal, annual_rate_percent, years, compounding_frequency, monthly_contribution
    )

    # A zero-year horizon counts one year of contributions with no growth
    if years == 0 and (principal > 0 or monthly_contribution > 0):
        total = principal + monthly_contribution * MONTHS_PER_YEAR
        return CompoundInterestResult(
            future_value=total,
            interest_earned=0.0,
            total_invested=total,
            future_value_principal=principal,
            future_value_contributions=monthly_contribution * MONTHS_PER_YEAR,
        )

    fv_principal, fv_contributions = _future_values(
        principal,
        annual_rate_percent / 100,
        years,
        compounding_frequency,
        monthly_contribution,
    )
    future_value = fv_principal + fv_contributions
    total_invested = principal + monthly_contribution * years * MONTHS_PER_YEAR

    return CompoundInterestResult(
        future_value=future_value,
        interest_earned=future_value - total_invested,
        total_invested=total_invested,
        future_value_principal=fv_principal,
        future_value_contributions=fv_contributions,
    )


def generate_growth_schedule(
    principal: float,
    annual_rate_percent: float,
    years: float,
    compounding_frequency: int = 12,
    monthly_contribution: float = 0.0,
) -> List[Dict]:
    """
    Generate a year-by-year growth schedule.

    A fractional horizon gets a final partial-year row, so the last balance
    always equals compute_compound_interest() for the same inputs.

    Returns:
        List of schedule rows (empty when years is 0). Amounts too large
        to represent are None.

    Raises:
        ValidationError: If the inputs are invalid, or the horizon exceeds
            MAX_SCHEDULE_YEARS
    """
    _validate(
        principal, annual_rate_percent, years, compounding_frequency, monthly_contribution
    )
    if years > MAX_SCHEDULE_YEARS:
        raise ValidationError(
            f"Growth schedule is limited to {MAX_SCHEDULE_YEARS} years."
        )

    schedule = []
    annual_rate = annual_rate_percent / 100

    for year in range(1, math.ceil(years) + 1):
        elapsed = min(float(year), years)
        fv_principal, fv_contributions = _future_values(
            principal, annual_rate, elapsed, compounding_frequency, monthly_contribution
        )
        balance = fv_principal + fv_contributions
        invested = principal + monthly_contribution * elapsed * MONTHS_PER_YEAR

        schedule.append(
            {
                "year": year,
                "elapsed_years": round(elapsed, 4),
                "total_invested": _rounded(invested),
                "interest_earned": _rounded(balance - invested),
                "balance": _rounded(balance),
            }
        )

    return schedule
