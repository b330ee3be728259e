# Project: tourism-forecast
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
report.py — Human-readable renderings of a weather analysis.

weather_prompt_summary() produces the paragraph that goes into the demand
forecast prompt; render_analysis_report() produces the terminal view used
by the CLI. Both accept None and say the weather is unavailable.
"""

import os

from tourism_forecast.utils import round_half_up

FALLBACK_TERMINAL_WIDTH: int = 80
BAR_LABEL_RESERVE: int = 30  # characters reserved for label + value outside the bar
UNAVAILABLE = "Weather data unavailable."

TREND_WORDS = {
    "increasing": "rising",
    "decreasing": "falling",
    "stable":     "steady",
}


def weather_prompt_summary(analysis: dict | None) -> str:
    """Summarise an analysis as one paragraph of prose for an LLM prompt.

    Example:
        "Average temperature 27.4°C (24.1°C to 31.0°C, rising). Mostly
        Clear (70% of the period). Average rainfall 0.3mm per 3 hours,
        peak 6.2mm. Average wind 4.8m/s, peak 9.1m/s. Weather impact score
        0.8 out of 1.0. 1 weather alert(s): Moderate rainfall expected:
        6.2mm in 3 hours."
    """
    if analysis is None:
        return UNAVAILABLE

    temp = analysis["temperature"]
    precip = analysis["precipitation"]
    wind = analysis["wind"]
    cond = analysis["conditions"]
    dominant = cond["dominant"]

    parts = [
        f"Average temperature {temp['average']:.1f}°C "
        f"({temp['min']:.1f}°C to {temp['max']:.1f}°C, {TREND_WORDS[temp['trend']]}).",
        f"Mostly {dominant} ({cond['percentages'][dominant]}% of the period).",
        f"Average rainfall {precip['average']:.1f}mm per 3 hours, peak {precip['max']:.1f}mm.",
        f"Average wind {wind['average']:.1f}m/s, peak {wind['max']:.1f}m/s.",
        f"Weather impact score {analysis['impact_score']} out of 1.0.",
    ]

    alerts = analysis["alerts"]
    if alerts:
        # Repeated bucket alerts collapse to one mention each
        unique = list(dict.fromkeys(a["message"] for a in alerts))
        parts.append(f"{len(alerts)} weather alert(s): {'; '.join(unique)}.")
    else:
        parts.append("No weather alerts.")

    return " ".join(parts)


def render_condition_chart(percentages: dict[str, int], bar_width: int | None = None) -> str:
    """Render condition shares as bars on a fixed 0-100% scale.

    bar_width is auto-detected from the terminal when None.
    """
    if bar_width is None:
        try:
            terminal_width = os.get_terminal_size().columns
        except OSError:
            terminal_width = FALLBACK_TERMINAL_WIDTH
        bar_width = max(10, terminal_width - BAR_LABEL_RESERVE)

    label_w = max((len(name) for name in percentages), default=0)
    lines = ["Conditions (% of forecast)"]
    for name, pct in percentages.items():
        filled = min(bar_width, int(round_half_up(pct / 100 * bar_width)))
        bar = "█" * filled + "░" * (bar_width - filled)
        lines.append(f"  {name:<{label_w}} │{bar}│ {pct:>3}%")
    return "\n".join(lines)


def render_analysis_report(
    location_name: str,
    analysis: dict | None,
    bar_width: int | None = None,
) -> str:
    """Return a formatted multi-line terminal report.

    Example:
        📍 Kingston, Jamaica — weather outlook
        ──────────────────────────────────────────────────────────────
        ⭐  Impact score:   0.8 / 1.0
        🌡  Temperature:    27.4°C avg (24.1°C to 31.0°C), rising
        ...
    """
    if analysis is None:
        return f"📍 {location_name} — {UNAVAILABLE}"

    temp = analysis["temperature"]
    precip = analysis["precipitation"]
    wind = analysis["wind"]
    cond = analysis["conditions"]
    sep = "─" * 62

    lines = [
        f"📍 {location_name} — weather outlook",
        sep,
        f"⭐  Impact score:   {analysis['impact_score']} / 1.0",
        f"🌡  Temperature:    {temp['average']:.1f}°C avg "
        f"({temp['min']:.1f}°C to {temp['max']:.1f}°C), {TREND_WORDS[temp['trend']]}",
        f"🌧  Rainfall:       {precip['average']:.1f} mm/3h avg "
        f"(peak {precip['max']:.1f} mm), {TREND_WORDS[precip['trend']]}",
        f"💨  Wind:           {wind['average']:.1f} m/s avg "
        f"(peak {wind['max']:.1f} m/s), {TREND_WORDS[wind['trend']]}",
        f"☁️  Mostly:         {cond['dominant']}",
        "",
        render_condition_chart(cond["percentages"], bar_width=bar_width),
        "",
    ]

    alerts = analysis["alerts"]
    if alerts:
        for alert in alerts:
            icon = "🛑" if alert["type"] == "critical" else "⚠️ "
            lines.append(f"{icon} {alert['type'].upper()}: {alert['message']}")
    else:
        lines.append("✅ No weather alerts.")
    lines.append(sep)
    return "\n".join(lines)
