"""
Scoring policy table.

Every threshold, breakpoint and weight the IPO scorecard uses lives here so it can
be pinned by tests and revised in one place. Scores are on a 0-10 scale.

Ladders are ((threshold, score), ...) ordered from the highest threshold down:
the first step the value meets or exceeds wins, otherwise the floor applies.
Breakpoints are ((input, score), ...) ordered by input and linearly interpolated;
inputs past either end take the end score.
"""

MIN_SCORE = 0.0
MAX_SCORE = 10.0
NEUTRAL_SCORE = 5.0
SCORE_PRECISION = 2

# ── Fundamentals ─────────────────────────────────────────────────

REVENUE_GROWTH_LADDER = ((30.0, 10.0), (15.0, 7.5), (0.0, 5.0))
REVENUE_GROWTH_FLOOR = 2.5

EBITDA_MARGIN_LADDER = ((25.0, 10.0), (15.0, 7.5), (5.0, 5.0), (0.0, 3.5))
EBITDA_MARGIN_FLOOR = 1.5

PAT_MARGIN_LADDER = ((15.0, 10.0), (8.0, 7.5), (3.0, 5.0), (0.0, 3.5))
PAT_MARGIN_FLOOR = 1.5

ROE_LADDER = ((25.0, 10.0), (15.0, 7.5), (10.0, 5.0), (0.0, 3.5))
ROE_FLOOR = 1.5

ROCE_LADDER = ((25.0, 10.0), (15.0, 7.5), (10.0, 5.0), (0.0, 3.5))
ROCE_FLOOR = 1.5

# Lower leverage is better; 3x and above scores zero
DEBT_TO_EQUITY_BREAKPOINTS = ((0.0, 10.0), (0.5, 8.0), (1.0, 6.0), (2.0, 2.5), (3.0, 0.0))

FUNDAMENTALS_WEIGHTS = {
    "revenue_growth": 0.20,
    "ebitda_margin": 0.15,
    "pat_margin": 0.15,
    "roe": 0.15,
    "roce": 0.20,
    "debt_to_equity": 0.15,
}

# ── Valuation ────────────────────────────────────────────────────

# ratio = P/E / sector median P/E
PE_RELATIVE_BREAKPOINTS = (
    (0.5, 10.0),
    (0.8, 8.5),
    (1.0, 7.0),
    (1.2, 5.5),
    (1.5, 3.5),
    (2.0, 2.0),
    (3.0, 0.5),
)

# Used when no sector median is available
PE_ABSOLUTE_BREAKPOINTS = ((10.0, 9.0), (15.0, 8.0), (25.0, 6.0), (40.0, 4.0), (60.0, 2.0), (100.0, 0.5))

PB_BREAKPOINTS = ((1.0, 9.0), (3.0, 7.0), (5.0, 5.0), (8.0, 3.0), (12.0, 1.5), (20.0, 0.5))

VALUATION_WEIGHTS = {
    "pe_ratio": 0.70,
    "pb_ratio": 0.30,
}

# ── Governance ───────────────────────────────────────────────────

# OFS share of the offer, 0 = all fresh issue
OFFER_MIX_BREAKPOINTS = ((0.0, 10.0), (0.25, 8.0), (0.5, 6.0), (0.75, 3.5), (1.0, 1.0))

# Promoter holding given up in the offering, percentage points
PROMOTER_DILUTION_BREAKPOINTS = ((0.0, 10.0), (5.0, 9.5), (10.0, 8.0), (20.0, 5.0), (35.0, 1.5), (50.0, 0.0))

GOVERNANCE_WEIGHTS = {
    "offer_mix": 0.60,
    "promoter_dilution": 0.40,
}

# ── Overall & risk ───────────────────────────────────────────────

OVERALL_WEIGHTS = {
    "fundamentals": 0.45,
    "valuation": 0.30,
    "governance": 0.25,
}

CONSERVATIVE_MIN_OVERALL = 7.0
CONSERVATIVE_MIN_GOVERNANCE = 6.0
MODERATE_MIN_OVERALL = 4.5

# ── Flags ────────────────────────────────────────────────────────

HIGH_OFS_RATIO = 0.75
RICH_PE_MULTIPLE = 1.5
HIGH_DEBT_TO_EQUITY = 2.0
SIGNIFICANT_DILUTION_PP = 20.0
STRONG_REVENUE_GROWTH = 25.0
HIGH_ROCE = 20.0
MAJORITY_FRESH_ISSUE = 0.7
