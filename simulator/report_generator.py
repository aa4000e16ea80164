"""
simulator/report_generator.py
-----------------------------
Deterministic, formatting-only rendering of a SimulationResult.

Design contract:
  - Does NOT compute metrics or projections
  - Does NOT mutate the result
  - Only interprets and formats SimulationEngine output
  - Fully stateless (all methods are @staticmethod)
"""

from typing import Dict

from simulator.constants import ASSET_LABELS
from simulator.enums import AssetClass
from simulator.scenario_classifier import ScenarioClassifier
from simulator.simulation_engine import SimulationResult


# Horizons shown in the CLI projection table
_TABLE_YEARS = (1, 5, 10, 15, 20)


class ReportGenerator:
    """
    Produce human-readable sections for one simulation pass.

    Entry point::

        sections = ReportGenerator.render(result)

        Returns a dict with five string sections:
        ``allocations``       – side-by-side current / target split
        ``dashboard``         – return, risk range and confidence of the target
        ``projection_table``  – projected wealth at selected horizons
        ``wealth_gap``        – best / worst terminal gap range
        ``feedback``          – scenario headline and bullets
    """

    # ------------------------------------------------------------------ #
    #  Public entry point
    # ------------------------------------------------------------------ #

    @staticmethod
    def render(result: SimulationResult) -> Dict[str, str]:
        return {
            "allocations":      ReportGenerator._allocations(result),
            "dashboard":        ReportGenerator._dashboard(result),
            "projection_table": ReportGenerator._projection_table(result),
            "wealth_gap":       ReportGenerator._wealth_gap(result),
            "feedback":         ReportGenerator._feedback(result),
        }

    # ------------------------------------------------------------------ #
    #  Section builders
    # ------------------------------------------------------------------ #

    @staticmethod
    def _allocations(result: SimulationResult) -> str:
        """Fixed-width table: Asset | Current | Target."""
        lines = [f"{'Asset':<20} {'Current':>8} {'Target':>8}"]
        for asset in AssetClass:
            lines.append(
                f"{ASSET_LABELS[asset]:<20} "
                f"{result.current.get(asset):>7}% "
                f"{result.target.get(asset):>7}%"
            )
        lines.append(
            f"{'Expected return':<20} "
            f"{result.current_metrics.expected_return:>7.1f}% "
            f"{result.target_metrics.expected_return:>7.1f}%"
        )
        return "\n".join(lines)

    @staticmethod
    def _dashboard(result: SimulationResult) -> str:
        m = result.target_metrics
        lines = [
            f"  Expected Return : {m.expected_return:>+7.1f}%",
            f"  Risk Range      : {m.worst_case_drawdown:.1f}% ~ {m.best_case_return:+.1f}%",
            f"  Confidence      : {round(m.confidence_score):>6d}%",
        ]
        if result.active_warning:
            lines.append("  Warning         : active trading above 20% earns the penalty rate.")
        return "\n".join(lines)

    @staticmethod
    def _projection_table(result: SimulationResult) -> str:
        frame = result.to_frame()
        rows = frame[frame.index.isin(_TABLE_YEARS)]
        lines = [f"{'Year':>4} {'Inflation':>15} {'Current':>15} {'Target':>15} {'Gap':>15}"]
        for years, row in rows.iterrows():
            lines.append(
                f"{years:>4} "
                f"{row['inflation']:>15,.0f} "
                f"{row['current']:>15,.0f} "
                f"{row['target']:>15,.0f} "
                f"{row['gap']:>+15,.0f}"
            )
        return "\n".join(lines)

    @staticmethod
    def _wealth_gap(result: SimulationResult) -> str:
        gap = result.wealth_gap
        return (
            f"After {gap.horizon_years} years the target plan ends "
            f"{ReportGenerator.format_money(gap.minimum)} to "
            f"{ReportGenerator.format_money(gap.maximum)} "
            f"versus the current plan "
            f"(worst {gap.worst_case_rate:.1f}%/yr, best {gap.best_case_rate:.1f}%/yr)."
        )

    @staticmethod
    def _feedback(result: SimulationResult) -> str:
        text = ScenarioClassifier.describe(result.scenario)
        marker = "!" if text["warning"] else "*"
        lines = [f"{marker} {text['title']}"]
        for label, body in text["points"]:
            lines.append(f"  - {label}: {body}")
        return "\n".join(lines)

    # ------------------------------------------------------------------ #
    #  Helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def format_money(value: float) -> str:
        """Whole units with separators; explicit ``+`` for positive values."""
        rounded = round(value)
        return f"+{rounded:,}" if rounded > 0 else f"{rounded:,}"

    # ------------------------------------------------------------------ #
    #  CLI formatter
    # ------------------------------------------------------------------ #

    @staticmethod
    def format_for_cli(sections: Dict[str, str]) -> str:
        """
        Render all sections as a single printable CLI string.

        Example::

            print(ReportGenerator.format_for_cli(ReportGenerator.render(result)))
        """
        return "\n".join([
            "=== Allocation Comparison ===",
            sections["allocations"],
            "",
            "--- Target Plan ---",
            sections["dashboard"],
            "",
            "--- Projected Wealth ---",
            sections["projection_table"],
            "",
            "--- Wealth Gap ---",
            sections["wealth_gap"],
            "",
            "--- Feedback ---",
            sections["feedback"],
        ])
