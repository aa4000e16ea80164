"""
simulator/constants.py
----------------------
Display constants shared across modules.

Placing these here keeps the formatting layer (ReportGenerator) and the
processing layer (ScenarioClassifier) aligned on a single source of truth
without creating circular imports.
"""

from __future__ import annotations

from simulator.enums import AssetClass, ScenarioCategory


# ---------------------------------------------------------------------------
# Asset labels
# ---------------------------------------------------------------------------

ASSET_LABELS: dict = {
    AssetClass.CASH:        "Cash / Deposits",
    AssetClass.INDEX_FUND:  "Index Funds / ETF",
    AssetClass.REAL_ESTATE: "Real Estate",
    AssetClass.ACTIVE:      "Active Trading",
}


# ---------------------------------------------------------------------------
# Scenario feedback registry
# ---------------------------------------------------------------------------
# Each entry drives the feedback block of the report:
#   - ``title``   one-line headline
#   - ``points``  ordered (label, text) bullets
#   - ``warning`` whether the headline should be rendered as a warning
#
# Keys must cover every ScenarioCategory member.
# ---------------------------------------------------------------------------

SCENARIO_TEXT: dict[ScenarioCategory, dict] = {
    ScenarioCategory.DANGER_ACTIVE: {
        "title": "Walking a tightrope: you are relying on luck",
        "warning": True,
        "points": [
            ("What is happening",
             "A large share sits in active trading (day trading, crypto, single "
             "stocks). It can make money fast, and it can wipe out the principal "
             "just as fast."),
            ("How it feels",
             "Your mood follows the ticker every day."),
            ("Suggestion",
             "Keep high-risk trading to a small slice (around 10%) and treat it "
             "as entertainment, not as the plan."),
        ],
    },
    ScenarioCategory.LIQUIDITY_CRISIS: {
        "title": "No cash on hand: what happens in an emergency?",
        "warning": True,
        "points": [
            ("What is happening",
             "Almost everything is invested and the bank balance is close to empty."),
            ("Risk",
             "A job loss or medical bill could force you to sell investments at "
             "the bottom of a downturn."),
            ("Suggestion",
             "Hold an emergency fund of about six months of expenses before "
             "investing the rest."),
        ],
    },
    ScenarioCategory.NO_REAL_ESTATE: {
        "title": "Very liquid, but thin on real assets",
        "warning": True,
        "points": [
            ("What is happening",
             "Your money is in stocks or cash and can be withdrawn any time, but "
             "there is no real-asset exposure."),
            ("Risk",
             "Housing costs and rents tend to rise with inflation; without "
             "real-asset exposure you pay that rise out of pocket."),
            ("Suggestion",
             "If buying property is out of reach, REITs give real-estate "
             "exposure with a small ticket size."),
        ],
    },
    ScenarioCategory.CASH_DOMINANT: {
        "title": "Too conservative: your money is quietly shrinking",
        "warning": False,
        "points": [
            ("What is happening",
             "Most of the money is parked in deposits. The balance never goes "
             "down, which feels safe."),
            ("Risk",
             "Inflation erodes purchasing power year after year."),
            ("Suggestion",
             "Move a modest slice (around 20%) into a broad index fund to keep "
             "pace with inflation."),
        ],
    },
    ScenarioCategory.RE_DOMINANT: {
        "title": "Property heavy: the money is locked up",
        "warning": False,
        "points": [
            ("What is happening",
             "Most of your net worth is in real estate."),
            ("Risk",
             "Property is slow to sell; a sudden large expense may force a "
             "discounted sale."),
            ("Suggestion",
             "Keep some cash or index funds alongside so you can raise money "
             "quickly."),
        ],
    },
    ScenarioCategory.ETF_DOMINANT: {
        "title": "Riding the roller coaster: steady nerves required",
        "warning": False,
        "points": [
            ("What is happening",
             "You are betting on long-run economic growth through index funds. "
             "A sound strategy, but not a smooth one."),
            ("Be prepared",
             "Markets can fall 30% or more; the hard part is not selling."),
            ("Suggestion",
             "Think in ten-year periods; short-term swings are noise."),
        ],
    },
    ScenarioCategory.BALANCED: {
        "title": "Offence and defence: a well-balanced mix",
        "warning": False,
        "points": [
            ("Why it works",
             "Cash covers emergencies, property and index funds fight "
             "inflation, and a small active slice reaches for extra return."),
            ("In practice",
             "Like a good car: airbags, a reliable engine, and an accelerator "
             "you can press now and then."),
            ("Outlook",
             "This is the mix that lets you sleep at night and grow steadily."),
        ],
    },
    ScenarioCategory.DEFAULT: {
        "title": "Still exploring: your money is spread thin",
        "warning": False,
        "points": [
            ("What is happening",
             "You have a little of everything and no clear core strategy."),
            ("Risk",
             "Without a core holding the portfolio tends to drift sideways."),
            ("Suggestion",
             "Pick the risk you tolerate best (slow-to-sell property or "
             "volatile stocks) and make it the core."),
        ],
    },
}
