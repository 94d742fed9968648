"""
Console report for a period of AQI readings.

Every function returns text; printing is left to the caller.
"""

from __future__ import annotations

from typing import List

from kampala_aqi.aqi import aqi_category, health_recommendation
from kampala_aqi.simulator import AQI_MAX, AQI_MIN
from kampala_aqi.stats import AQISummary, readings_frame


RULE = "=" * 40


def banner(city: str, days: int) -> str:
    return "\n".join(
        [
            RULE,
            f"{city} Air Quality Monitor",
            f"Smart City Initiative - {days} Day Analysis",
            RULE,
            "",
        ]
    )


def generation_notice(city: str, days: int) -> str:
    return "\n".join(
        [
            f"🌡️  GENERATING {days} DAYS OF AQI DATA FOR {city.upper()}",
            f"   Range: {AQI_MIN}-{AQI_MAX} AQI units",
            "",
        ]
    )


def daily_table(summary: AQISummary, city: str) -> str:
    lines = [
        f"📅 DAILY AQI READINGS FOR {city.upper()}:",
        "Day  | AQI  | Category",
        "-----|------|------------------",
    ]
    for row in readings_frame(summary.readings).itertuples(index=False):
        lines.append(f"{row.day:2d}   | {row.aqi:3d}  | {row.category.label}")
    lines.append("")
    return "\n".join(lines)


def median_section(summary: AQISummary) -> str:
    # Category of the median uses its integer part.
    category = aqi_category(int(summary.median))
    return "\n".join(
        [
            f"📊 MEDIAN AQI VALUE: {summary.median:.1f}",
            f"   Category: {category.label}",
        ]
    )


def hazardous_section(summary: AQISummary) -> str:
    lines = ["🚨 HAZARDOUS DAYS ANALYSIS (AQI > 200):"]
    for record in summary.hazardous_days:
        lines.append(f"   Day {record.day}: AQI {record.aqi} ({record.category.label})")
    if not summary.hazardous_days:
        lines.append("   ✅ No hazardous days recorded!")
    lines += [
        "",
        f"⚠️  HAZARDOUS DAYS (AQI > 200): {summary.hazardous_count} days",
        f"   Percentage: {summary.hazardous_percentage:.1f}%",
    ]
    return "\n".join(lines)


def additional_analysis(summary: AQISummary, city: str) -> str:
    best = aqi_category(summary.minimum)
    worst = aqi_category(summary.maximum)
    return "\n".join(
        [
            "",
            f"📈 ADDITIONAL {city.upper()} AIR QUALITY ANALYSIS:",
            f"   Average AQI: {summary.average:.1f}",
            f"   Best Day: AQI {summary.minimum} ({best.label})",
            f"   Worst Day: AQI {summary.maximum} ({worst.label})",
        ]
    )


def distribution_section(summary: AQISummary) -> str:
    lines = ["", "🏷️  AQI CATEGORY DISTRIBUTION:"]
    for category, count in summary.distribution.items():
        lines.append(f"   {category.range_label}: {count} days")
    return "\n".join(lines)


def recommendation_section(summary: AQISummary, city: str) -> str:
    advice = health_recommendation(summary.average)
    if summary.average <= 50:
        marker = "✅"
    elif summary.average <= 150:
        marker = "⚠️ "
    else:
        marker = "🚨"
    return "\n".join(
        [
            "",
            f"💡 HEALTH RECOMMENDATIONS FOR {city.upper()}:",
            f"   {marker} {advice}",
        ]
    )


def render_report(summary: AQISummary, *, city: str = "Kampala") -> str:
    sections: List[str] = [
        banner(city, summary.days),
        generation_notice(city, summary.days),
        daily_table(summary, city),
        median_section(summary),
        hazardous_section(summary),
        additional_analysis(summary, city),
        distribution_section(summary),
        recommendation_section(summary, city),
    ]
    return "\n".join(sections)
