"""
Templated text over a ScoreSummary: short summary/recommendation sentences and
the HTML alert body handed to the notification layer. Output is deterministic
for a given summary and profile.
"""
from html import escape

from app.config import get_settings
from app.schemas.ipo import IpoProfile
from app.schemas.scorecard import RiskLevel, ScoreSummary

DISCLAIMER = "Disclaimer: This is for screening only, not investment advice."

ALERT_HEADERS = {
    "new_ipo": "[New IPO Listed]",
    "gmp_change": "[GMP Update]",
    "open_date": "[IPO Opening Soon]",
    "analysis_ready": "[Analysis Ready]",
}
DEFAULT_ALERT_HEADER = "[IPO Alert]"

_RISK_LABELS = {
    RiskLevel.CONSERVATIVE: "Low Risk",
    RiskLevel.MODERATE: "Medium Risk",
    RiskLevel.AGGRESSIVE: "High Risk",
}

_INVESTOR_FIT = {
    RiskLevel.CONSERVATIVE: "conservative",
    RiskLevel.MODERATE: "moderate-risk",
    RiskLevel.AGGRESSIVE: "aggressive, high-risk",
}


def score_label(overall: float | None) -> str:
    if overall is None:
        return "Score"
    if overall >= 7:
        return "Strong"
    elif overall >= 5:
        return "Moderate"
    return "Weak"


def risk_label(level: RiskLevel | str | None) -> str:
    try:
        return _RISK_LABELS[RiskLevel(level)]
    except ValueError:
        return "Unknown"


def _truncate(text: str, limit: int) -> str:
    if len(text) <= limit:
        return text
    return text[: max(0, limit - 3)].rstrip() + "..."


def _strongest_axis(summary: ScoreSummary) -> tuple[str, str]:
    axes = [
        ("fundamentals", summary.fundamentals_score),
        ("valuation", summary.valuation_score),
        ("governance", summary.governance_score),
    ]
    # stable sort keeps the fundamentals > valuation > governance order on ties
    ranked = sorted(axes, key=lambda a: a[1], reverse=True)
    return ranked[0][0], ranked[-1][0]


def build_summary_text(summary: ScoreSummary, profile: IpoProfile | None = None) -> str:
    name = profile.company_name if profile and profile.company_name else "This offering"
    sector = f" in the {profile.sector} sector" if profile and profile.sector else ""
    strongest, weakest = _strongest_axis(summary)

    text = (
        f"{name} is an IPO{sector} scoring {summary.overall_score:.1f}/10 overall "
        f"({score_label(summary.overall_score).lower()}) with a {summary.risk_level.value} risk profile. "
        f"Strongest on {strongest} ({getattr(summary, strongest + '_score'):.1f}), "
        f"weakest on {weakest} ({getattr(summary, weakest + '_score'):.1f})."
    )
    if summary.red_flags:
        text += f" Main concern: {summary.red_flags[0]}."
    return _truncate(text, get_settings().narrative_max_length)


def build_recommendation_text(summary: ScoreSummary) -> str:
    fit = _INVESTOR_FIT[summary.risk_level]
    text = f"Based on the computed scores, this IPO appears suitable for {fit} investors."
    if summary.breakdown.confidence < 0.5:
        text += " Limited disclosure data: treat the score as provisional."
    text += " Always conduct your own research."
    return _truncate(text, get_settings().narrative_max_length)


def format_alert_message(
    summary: ScoreSummary,
    profile: IpoProfile,
    alert_type: str,
    gmp: float | None = None,
) -> str:
    """HTML alert body. Only <b> and <i> tags are used; profile text is escaped."""
    settings = get_settings()
    header = ALERT_HEADERS.get(alert_type, DEFAULT_ALERT_HEADER)
    status = profile.status.upper() if profile.status else "N/A"

    lines = [
        f"<b>{header}</b>",
        "",
        f"<b>{escape(profile.company_name or profile.symbol)}</b> ({escape(profile.symbol)})",
        f"Sector: {escape(profile.sector or 'N/A')}",
        f"Price: {escape(profile.price_range or 'N/A')}",
        f"Status: {status}",
        "",
        f"[{score_label(summary.overall_score)}] Overall Score: {summary.overall_score:.1f}/10",
        f"[{risk_label(summary.risk_level)}] Risk Level: {summary.risk_level.value}",
    ]

    if gmp is not None:
        sign = "+" if gmp >= 0 else ""
        lines.append(f"GMP: {sign}Rs.{gmp:g}")

    if summary.red_flags:
        lines.append("")
        lines.append("<b>Red Flags:</b>")
        lines.extend(f"- {escape(flag)}" for flag in summary.red_flags[: settings.alert_max_items])

    if summary.pros:
        lines.append("")
        lines.append("<b>Positives:</b>")
        lines.extend(f"- {escape(pro)}" for pro in summary.pros[: settings.alert_max_items])

    lines.append("")
    lines.append(f"<i>{DISCLAIMER}</i>")
    return "\n".join(lines)
