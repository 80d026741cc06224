"""
Financial calculation API endpoints.

These endpoints accept form inputs and return calculated results together
with display strings. Empty form fields arrive as 0.

The income statement and balance sheet endpoints record their results in
the caller's session snapshot, which the ratios endpoint reads.
"""

import logging
import math
from dataclasses import asdict
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from app.api.dependencies import calculation_delay, get_session_id
from app.calculations import breakeven, interest, ratios, statements
from app.calculations.formatting import (
    format_currency,
    format_percentage,
    format_ratio,
    format_units,
)
from app.calculations.validation import ValidationError
from app.services.snapshot_store import SnapshotStore, get_snapshot_store

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(calculation_delay)])


def _defined(value: float) -> Optional[float]:
    """NaN is not valid JSON; undefined values go out as null."""
    if math.isnan(value) or math.isinf(value):
        return None
    return value


def _rejected(calculator: str, error: ValidationError) -> HTTPException:
    logger.info(f"{calculator} rejected: {error.message}")
    return HTTPException(status_code=400, detail=error.message)


# ============================================================================
# INCOME STATEMENT
# ============================================================================


class IncomeStatementInput(BaseModel):
    """Input for income statement calculation."""

    total_revenue: float = 0.0
    cogs: float = 0.0
    operating_expenses: float = 0.0
    interest_expense: float = 0.0
    tax_expense: float = 0.0


class IncomeStatementResponse(BaseModel):
    """Profit lines with display strings."""

    gross_profit: float
    ebit: float
    net_profit: float
    display: Dict[str, str]


@router.post("/income-statement", response_model=IncomeStatementResponse)
async def calculate_income_statement(
    inputs: IncomeStatementInput,
    session_id: str = Depends(get_session_id),
    store: SnapshotStore = Depends(get_snapshot_store),
):
    """Calculate the income statement and record it for the ratios calculator."""
    try:
        result = statements.compute_income_statement(**inputs.model_dump())
    except ValidationError as e:
        raise _rejected("Income statement", e)

    store.write(session_id, result)

    return IncomeStatementResponse(
        gross_profit=result.gross_profit,
        ebit=result.ebit,
        net_profit=result.net_profit,
        display={
            "gross_profit": format_currency(result.gross_profit),
            "ebit": format_currency(result.ebit),
            "net_profit": format_currency(result.net_profit),
        },
    )


# ============================================================================
# BALANCE SHEET
# ============================================================================


class BalanceSheetInput(BaseModel):
    """Input for balance sheet calculation."""

    total_assets: float = 0.0
    total_liabilities: float = 0.0


class BalanceSheetResponse(BaseModel):
    equity: float
    display: Dict[str, str]


@router.post("/balance-sheet", response_model=BalanceSheetResponse)
async def calculate_balance_sheet(
    inputs: BalanceSheetInput,
    session_id: str = Depends(get_session_id),
    store: SnapshotStore = Depends(get_snapshot_store),
):
    """Calculate equity and record the balance sheet for the ratios calculator."""
    try:
        result = statements.compute_balance_sheet(**inputs.model_dump())
    except ValidationError as e:
        raise _rejected("Balance sheet", e)

    store.write(session_id, result)

    return BalanceSheetResponse(
        equity=result.equity,
        display={"equity": format_currency(result.equity)},
    )


# ============================================================================
# FINANCIAL RATIOS
# ============================================================================


class RatiosInput(BaseModel):
    """
    Input for ratio calculation.

    Statement figures left as null fall back to the session snapshot; an
    explicit 0 is used as zero.
    """

    current_assets: float = 0.0
    current_liabilities: float = 0.0
    inventory: float = 0.0
    accounts_receivable: float = 0.0

    total_revenue: Optional[float] = None
    cogs: Optional[float] = None
    total_assets: Optional[float] = None
    total_liabilities: Optional[float] = None
    interest_expense: Optional[float] = None


class RatiosResponse(BaseModel):
    """Calculated ratios. Null marks a ratio with a zero denominator."""

    # Profitability (percent)
    gross_profit_margin: Optional[float] = None
    operating_margin: Optional[float] = None
    net_profit_margin: Optional[float] = None
    return_on_assets: Optional[float] = None
    return_on_equity: Optional[float] = None

    # Liquidity
    current_ratio: Optional[float] = None
    quick_ratio: Optional[float] = None

    # Efficiency
    inventory_turnover: Optional[float] = None
    receivable_turnover: Optional[float] = None
    asset_turnover: Optional[float] = None

    # Leverage
    debt_to_equity: Optional[float] = None
    debt_ratio: Optional[float] = None
    interest_coverage: Optional[float] = None

    display: Dict[str, str]


@router.post("/ratios", response_model=RatiosResponse)
async def calculate_ratios(
    inputs: RatiosInput,
    session_id: str = Depends(get_session_id),
    store: SnapshotStore = Depends(get_snapshot_store),
):
    """Calculate financial ratios from the session snapshot and fresh inputs."""
    snapshot = store.read(session_id)

    try:
        result = ratios.compute_ratios(snapshot, **inputs.model_dump())
    except ValidationError as e:
        raise _rejected("Ratios", e)

    values = asdict(result)
    display = {
        name: format_percentage(value)
        if name in ratios.PERCENT_RATIOS
        else format_ratio(value)
        for name, value in values.items()
    }

    return RatiosResponse(
        **{name: _defined(value) for name, value in values.items()},
        display=display,
    )


# ============================================================================
# BREAK-EVEN POINT
# ============================================================================


class BreakEvenInput(BaseModel):
    """Input for break-even calculation."""

    fixed_cost: float = 0.0
    selling_price_per_unit: float = 0.0
    variable_cost_per_unit: float = 0.0


class BreakEvenResponse(BaseModel):
    contribution_margin: Optional[float] = None
    contribution_margin_ratio: Optional[float] = None
    break_even_units: Optional[float] = None
    break_even_revenue: Optional[float] = None
    display: Dict[str, str]


@router.post("/break-even", response_model=BreakEvenResponse)
async def calculate_break_even(inputs: BreakEvenInput):
    """Calculate break-even units and revenue."""
    try:
        result = breakeven.compute_break_even(**inputs.model_dump())
    except ValidationError as e:
        raise _rejected("Break-even", e)

    return BreakEvenResponse(
        **{name: _defined(value) for name, value in asdict(result).items()},
        display={
            "contribution_margin": format_currency(result.contribution_margin),
            "contribution_margin_ratio": format_percentage(
                result.contribution_margin_ratio
            ),
            "break_even_units": format_units(result.break_even_units),
            "break_even_revenue": format_currency(result.break_even_revenue),
        },
    )


# ============================================================================
# COMPOUND INTEREST
# ============================================================================


class CompoundInterestInput(BaseModel):
    """Input for compound interest calculation."""

    principal: float = 0.0
    annual_rate_percent: float = 0.0
    years: float = 0.0
    compounding_frequency: int = 12
    monthly_contribution: float = 0.0


class CompoundInterestResponse(BaseModel):
    """Future value breakdown. Null marks an amount too large to represent."""

    future_value: Optional[float] = None
    interest_earned: Optional[float] = None
    total_invested: Optional[float] = None
    future_value_principal: Optional[float] = None
    future_value_contributions: Optional[float] = None
    display: Dict[str, str]


@router.post("/compound-interest", response_model=CompoundInterestResponse)
async def calculate_compound_interest(inputs: CompoundInterestInput):
    """Calculate future value, interest earned and total invested."""
    try:
        result = interest.compute_compound_interest(**inputs.model_dump())
    except ValidationError as e:
        raise _rejected("Compound interest", e)

    return CompoundInterestResponse(
        **{name: _defined(value) for name, value in asdict(result).items()},
        display={
            "future_value": format_currency(result.future_value),
            "interest_earned": format_currency(result.interest_earned),
            "total_invested": format_currency(result.total_invested),
        },
    )


class GrowthScheduleResponse(BaseModel):
    schedule: List[dict]


@router.post("/compound-interest/schedule", response_model=GrowthScheduleResponse)
async def calculate_growth_schedule(inputs: CompoundInterestInput):
    """Generate a year-by-year growth schedule."""
    try:
        schedule = interest.generate_growth_schedule(**inputs.model_dump())
    except ValidationError as e:
        raise _rejected("Growth schedule", e)

    return GrowthScheduleResponse(schedule=schedule)
