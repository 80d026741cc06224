"""
Financial Ratio Calculations

Profitability, liquidity, efficiency and leverage ratios. Statement figures
come from the caller's FinancialSnapshot unless a fresh value is supplied;
a ratio whose denominator is zero is NaN rather than an error.
"""

from dataclasses import dataclass
from typing import Optional

from app.calculations.statements import FinancialSnapshot
from app.calculations.validation import (
    ValidationError,
    is_missing,
    require_finite,
    require_non_negative,
    safe_divide,
)

MISSING_DATA_MESSAGE = (
    "Please calculate basic financial statements and/or "
    "fill in all required ratio inputs."
)
NEGATIVE_RATIO_INPUT_MESSAGE = "Please enter non-negative values for all ratio inputs."

# Ratios reported as percentages; the rest are plain multiples
PERCENT_RATIOS = (
    "gross_profit_margin",
    "operating_margin",
    "net_profit_margin",
    "return_on_assets",
    "return_on_equity",
)


@dataclass
class FinancialRatios:
    """The twelve ratios. NaN marks a ratio with a zero denominator."""

    # Profitability (percent)
    gross_profit_margin: float
    operating_margin: float
    net_profit_margin: float
    return_on_assets: float
    return_on_equity: float

    # Liquidity
    current_ratio: float
    quick_ratio: float

    # Efficiency
    inventory_turnover: float
    receivable_turnover: float
    asset_turnover: float

    # Leverage
    debt_to_equity: float
    debt_ratio: float
    interest_coverage: float


def _current_or_cached(current: Optional[float], cached: Optional[float]) -> Optional[float]:
    """Use the freshly entered value when one was given, else the cached one."""
    return current if current is not None else cached


def compute_ratios(
    snapshot: FinancialSnapshot,
    current_assets: float,
    current_liabilities: float,
    inventory: float,
    accounts_receivable: float,
    total_revenue: Optional[float] = None,
    cogs: Optional[float] = None,
    total_assets: Optional[float] = None,
    total_liabilities: Optional[float] = None,
    interest_expense: Optional[float] = None,
) -> FinancialRatios:
    """
    Calculate financial ratios from a snapshot plus freshly entered values.

    Gross profit, EBIT, net profit and equity are only ever read from the
    snapshot. The snapshot itself is never modified.

    Args:
        snapshot: Statement figures for the caller's session
        current_assets: Current assets
        current_liabilities: Current liabilities
        inventory: Inventory balance
        accounts_receivable: Accounts receivable balance
        total_revenue: Overrides the snapshot value when not None
        cogs: Overrides the snapshot value when not None
        total_assets: Overrides the snapshot value when not None
        total_liabilities: Overrides the snapshot value when not None
        interest_expense: Overrides the snapshot value when not None

    Returns:
        FinancialRatios

    Raises:
        ValidationError: If any required figure is missing or not finite,
            or a ratio input is negative
    """
    total_revenue = _current_or_cached(total_revenue, snapshot.total_revenue)
    cogs = _current_or_cached(cogs, snapshot.cogs)
    total_assets = _current_or_cached(total_assets, snapshot.total_assets)
    total_liabilities = _current_or_cached(total_liabilities, snapshot.total_liabilities)
    interest_expense = _current_or_cached(interest_expense, snapshot.interest_expense)
    gross_profit = snapshot.gross_profit
    ebit = snapshot.ebit
    net_profit = snapshot.net_profit
    equity = snapshot.equity

    required = [
        total_revenue,
        cogs,
        gross_profit,
        ebit,
        net_profit,
        total_assets,
        total_liabilities,
        equity,
        current_assets,
        current_liabilities,
        inventory,
        accounts_receivable,
        interest_expense,
    ]
    if any(is_missing(v) for v in required):
        raise ValidationError(MISSING_DATA_MESSAGE)
    require_finite(required)
    require_non_negative(
        [current_assets, current_liabilities, inventory, accounts_receivable],
        NEGATIVE_RATIO_INPUT_MESSAGE,
    )

    return FinancialRatios(
        gross_profit_margin=safe_divide(gross_profit, total_revenue, 100),
        operating_margin=safe_divide(ebit, total_revenue, 100),
        net_profit_margin=safe_divide(net_profit, total_revenue, 100),
        return_on_assets=safe_divide(net_profit, total_assets, 100),
        return_on_equity=safe_divide(net_profit, equity, 100),
        current_ratio=safe_divide(current_assets, current_liabilities),
        quick_ratio=safe_divide(current_assets - inventory, current_liabilities),
        inventory_turnover=safe_divide(cogs, inventory),
        receivable_turnover=safe_divide(total_revenue, accounts_receivable),
        asset_turnover=safe_divide(total_revenue, total_assets),
        debt_to_equity=safe_divide(total_liabilities, equity),
        debt_ratio=safe_divide(total_liabilities, total_assets),
        interest_coverage=safe_divide(ebit, interest_expense),
    )
