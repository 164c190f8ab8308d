"""Text rendering of calculation results."""
from optn.strategy.strategy_calculator import CoveredCallResult, ShortPutResult


def format_money(value: float) -> str:
    """Two decimals with thousands separators, e.g. 5,000.00."""
    return f"{value:,.2f}"


def format_pct(value: float) -> str:
    """Render a fraction as a two-decimal percentage, e.g. 0.0299 -> 2.99%."""
    return f"{value * 100.0:,.2f}%"


def render_short_put(result: ShortPutResult) -> str:
    lines = [
        f"Days in Market: {result.weekdays:>13}",
        f"Capital:       ${format_money(result.capital):>13}",
        f"Max Value:     ${format_money(result.max_value):>13}",
        f"Pct Gain:       {format_pct(result.pct_gain):>14}",
        f"Pct Annualized: {format_pct(result.pct_annualized):>14}",
        f"Break Even:    ${format_money(result.break_even):>13}",
    ]
    return "\n".join(lines)


def render_covered_call(result: CoveredCallResult) -> str:
    lines = [
        f"Days in Market: {result.weekdays:>13}",
        f"Capital:       ${format_money(result.capital):>13}",
        f"Max Value:     ${format_money(result.max_value):>13}",
        f"Pct Max Gain:   {format_pct(result.pct_max_gain):>14}",
        f"    Annualized: {format_pct(result.pct_max_annualized):>14}",
        f"Low Value:     ${format_money(result.low_value):>13}",
        f"Pct Low Gain:   {format_pct(result.pct_low_gain):>14}",
        f"    Annualized: {format_pct(result.pct_low_annualized):>14}",
    ]
    return "\n".join(lines)
