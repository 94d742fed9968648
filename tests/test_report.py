from kampala_aqi.report import hazardous_section, median_section, render_report
from kampala_aqi.stats import summarize


def test_report_sections():
    text = render_report(summarize([10, 20, 30, 40]), city="Kampala")
    assert "Kampala Air Quality Monitor" in text
    assert "Smart City Initiative - 4 Day Analysis" in text
    assert " 1   |  10  | Good" in text
    assert "MEDIAN AQI VALUE: 25.0" in text
    assert "No hazardous days recorded!" in text
    assert "Percentage: 0.0%" in text
    assert "Average AQI: 25.0" in text
    assert "Best Day: AQI 10 (Good)" in text
    assert "Worst Day: AQI 40 (Good)" in text
    assert "Good (0-50): 4 days" in text
    assert "Hazardous (301+): 0 days" in text
    assert "generally good for outdoor activities" in text


def test_hazardous_lines_and_percentage():
    text = hazardous_section(summarize([201, 50, 300, 100]))
    assert "Day 1: AQI 201 (Very Unhealthy)" in text
    assert "Day 3: AQI 300 (Very Unhealthy)" in text
    assert "HAZARDOUS DAYS (AQI > 200): 2 days" in text
    assert "Percentage: 50.0%" in text


def test_median_category_uses_integer_part():
    text = median_section(summarize([50, 51]))
    assert "MEDIAN AQI VALUE: 50.5" in text
    assert "Category: Good" in text


def test_poor_air_recommendation():
    text = render_report(summarize([250, 260, 270]), city="Gulu")
    assert "HEALTH RECOMMENDATIONS FOR GULU" in text
    assert "Poor air quality" in text
