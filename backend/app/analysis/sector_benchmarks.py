"""
Sector-relative valuation scoring.

A P/E multiple is scored against the offering's sector/peer median P/E when the
prospectus discloses one, and against an absolute table otherwise:

  ratio = P/E / sector median
  ratio < 1  → cheaper than peers → higher score
  ratio > 1  → richer than peers → lower score
"""
from app.analysis import policy
from app.analysis.grading import interpolate


def score_relative(value: float, benchmark: float) -> float:
    """Score a lower-is-better multiple against its peer benchmark, 0-10."""
    if benchmark <= 0:
        return policy.NEUTRAL_SCORE  # Can't compare to zero/negative benchmark

    return interpolate(value / benchmark, policy.PE_RELATIVE_BREAKPOINTS)


def score_pe(pe: float, sector_pe: float | None) -> tuple[float, str]:
    """
    Returns (score, basis) where basis is 'sector' or 'absolute'.
    Falls back to the absolute table when no sector median is known.
    """
    if sector_pe is not None and sector_pe > 0:
        return score_relative(pe, sector_pe), "sector"
    return interpolate(pe, policy.PE_ABSOLUTE_BREAKPOINTS), "absolute"


def describe_relative(pe: float, sector_pe: float) -> str:
    ratio = pe / sector_pe
    if ratio < 0.8:
        context = "Discount to peers"
    elif ratio < 1.1:
        context = "In line with peers"
    elif ratio <= policy.RICH_PE_MULTIPLE:
        context = "Premium to peers"
    else:
        context = "Expensive vs peers"
    return f"P/E {pe:.1f} vs sector median {sector_pe:.1f}: {context}"
