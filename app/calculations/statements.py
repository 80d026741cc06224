"""
Income Statement and Balance Sheet Calculations

Both calculators feed the FinancialSnapshot that the ratio calculator reads,
so later calculators can reuse figures computed by earlier ones.
"""

from dataclasses import dataclass, fields, asdict
from typing import Dict, Optional

from app.calculations.validation import (
    ValidationError,
    require_non_negative,
)


@dataclass
class FinancialSnapshot:
    """
    Most recent statement figures for one session.

    A field stays None until the calculator that produces it has run.
    Income statement fields and balance sheet fields are overwritten
    independently of each other.
    """

    total_revenue: Optional[float] = None
    cogs: Optional[float] = None
    gross_profit: Optional[float] = None
    ebit: Optional[float] = None
    net_profit: Optional[float] = None
    interest_expense: Optional[float] = None
    total_assets: Optional[float] = None
    total_liabilities: Optional[float] = None
    equity: Optional[float] = None

    def clear(self) -> None:
        for f in fields(self):
            setattr(self, f.name, None)

    def to_dict(self) -> Dict[str, Optional[float]]:
        return asdict(self)


@dataclass
class IncomeStatementResult:
    """Outputs of the income statement calculator."""

    total_revenue: float
    cogs: float
    gross_profit: float
    ebit: float
    net_profit: float
    interest_expense: float

    def apply_to(self, snapshot: FinancialSnapshot) -> None:
        """Write this statement's figures into a snapshot."""
        snapshot.total_revenue = self.total_revenue
        snapshot.cogs = self.cogs
        snapshot.gross_profit = self.gross_profit
        snapshot.ebit = self.ebit
        snapshot.net_profit = self.net_profit
        snapshot.interest_expense = self.interest_expense


@dataclass
class BalanceSheetResult:
    """Outputs of the balance sheet calculator."""

    total_assets: float
    total_liabilities: float
    equity: float

    def apply_to(self, snapshot: FinancialSnapshot) -> None:
        snapshot.total_assets = self.total_assets
        snapshot.total_liabilities = self.total_liabilities
        snapshot.equity = self.equity


def compute_income_statement(
    total_revenue: float,
    cogs: float,
    operating_expenses: float = 0.0,
    interest_expense: float = 0.0,
    tax_expense: float = 0.0,
) -> IncomeStatementResult:
    """
    Calculate gross profit, EBIT and net profit.

    Args:
        total_revenue: Total revenue for the period
        cogs: Cost of goods sold
        operating_expenses: Operating expenses (SG&A etc.)
        interest_expense: Interest expense
        tax_expense: Income tax expense

    Returns:
        IncomeStatementResult with the derived profit lines

    Raises:
        ValidationError: If COGS exceeds a non-zero revenue, or any input
            is negative
    """
    # Zero revenue is exempt so an all-empty form still computes
    if cogs > total_revenue and total_revenue != 0:
        raise ValidationError("Cost of Goods Sold cannot exceed Total Revenue.")
    require_non_negative(
        [total_revenue, cogs, operating_expenses, interest_expense, tax_expense]
    )

    gross_profit = total_revenue - cogs
    ebit = gross_profit - operating_expenses
    net_profit = ebit - interest_expense - tax_expense

    return IncomeStatementResult(
        total_revenue=total_revenue,
        cogs=cogs,
        gross_profit=gross_profit,
        ebit=ebit,
        net_profit=net_profit,
        interest_expense=interest_expense,
    )


def compute_balance_sheet(
    total_assets: float, total_liabilities: float
) -> BalanceSheetResult:
    """
    Calculate shareholders' equity (assets minus liabilities).

    Raises:
        ValidationError: If an input is negative, or liabilities exceed
            non-zero assets
    """
    require_non_negative([total_assets, total_liabilities])
    if total_liabilities > total_assets and total_assets != 0:
        raise ValidationError("Total Liabilities cannot exceed Total Assets.")

    return BalanceSheetResult(
        total_assets=total_assets,
        total_liabilities=total_liabilities,
        equity=total_assets - total_liabilities,
    )
