import pytest

from kampala_aqi.aqi import AQICategory, aqi_category, health_recommendation, is_hazardous


@pytest.mark.parametrize(
    "value, expected",
    [
        (1, AQICategory.GOOD),
        (50, AQICategory.GOOD),
        (51, AQICategory.MODERATE),
        (100, AQICategory.MODERATE),
        (150, AQICategory.UNHEALTHY_SENSITIVE),
        (200, AQICategory.UNHEALTHY),
        (201, AQICategory.VERY_UNHEALTHY),
        (300, AQICategory.VERY_UNHEALTHY),
        (301, AQICategory.HAZARDOUS),
    ],
)
def test_category_boundaries(value, expected):
    assert aqi_category(value) is expected


def test_categories_are_ordered_bands():
    assert [c.ordinal for c in AQICategory] == list(range(6))
    assert AQICategory.UNHEALTHY_SENSITIVE.label == "Unhealthy for Sensitive"
    assert AQICategory.HAZARDOUS.range_label == "Hazardous (301+)"


def test_hazardous_threshold_is_exclusive():
    assert not is_hazardous(200)
    assert is_hazardous(201)


@pytest.mark.parametrize(
    "avg, fragment",
    [
        (50, "generally good"),
        (75, "sensitive individuals should be cautious"),
        (125, "Unhealthy for sensitive groups"),
        (175, "Poor air quality"),
    ],
)
def test_recommendation_thresholds(avg, fragment):
    assert fragment in health_recommendation(avg)
