"""
Break-Even Point Calculations
"""

from dataclasses import dataclass

from app.calculations.validation import ValidationError, require_non_negative


@dataclass
class BreakEvenResult:
    """Break-even volume and revenue."""

    contribution_margin: float
    contribution_margin_ratio: float  # percent of selling price
    break_even_units: float
    break_even_revenue: float


def compute_break_even(
    fixed_cost: float, selling_price_per_unit: float, variable_cost_per_unit: float
) -> BreakEvenResult:
    """
    Calculate the sales volume at which total revenue covers total cost.

    Args:
        fixed_cost: Total fixed costs for the period
        selling_price_per_unit: Selling price of one unit
        variable_cost_per_unit: Variable cost of one unit

    Returns:
        BreakEvenResult

    Raises:
        ValidationError: If an input is negative, or the contribution
            margin is not strictly positive
    """
    require_non_negative([fixed_cost, selling_price_per_unit, variable_cost_per_unit])
    if selling_price_per_unit <= variable_cost_per_unit:
        raise ValidationError(
            "Selling price per unit must be greater than variable cost per unit."
        )

    contribution_margin = selling_price_per_unit - variable_cost_per_unit
    break_even_units = fixed_cost / contribution_margin

    return BreakEvenResult(
        contribution_margin=contribution_margin,
        contribution_margin_ratio=contribution_margin / selling_price_per_unit * 100,
        break_even_units=break_even_units,
        break_even_revenue=break_even_units * selling_price_per_unit,
    )
