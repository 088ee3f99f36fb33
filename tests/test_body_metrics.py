"""
Tests for the body metrics snapshot

BMI and category, Mifflin-St Jeor BMR, calorie needs by training
frequency, body-fat estimate bounds and waist-to-hip ratio.
"""
import pytest

from services.body_metrics import (
    activity_factor,
    bmi_category,
    calculate_bmi,
    calculate_bmr,
    calculate_body_metrics,
    estimate_body_fat,
    waist_to_hip_ratio,
)


class TestBMI:
    """BMI and categories"""

    def test_standard_bmi_calculation(self):
        """70kg, 175cm -> 22.857... rounded to 22.86"""
        assert calculate_bmi(70, 175) == 22.86

    @pytest.mark.parametrize("bmi,category", [
        (17.0, "Underweight"),
        (18.5, "Normal weight"),
        (24.99, "Normal weight"),
        (25.0, "Overweight"),
        (30.0, "Obesity Class I"),
        (35.0, "Obesity Class II"),
        (40.0, "Obesity Class III"),
    ])
    def test_categories(self, bmi, category):
        assert bmi_category(bmi) == category


class TestEnergy:
    """BMR and daily calorie needs"""

    def test_bmr_male(self):
        # 700 + 1093.75 - 150 + 5
        assert calculate_bmr(70, 175, 30, "male") == 1649

    def test_bmr_female(self):
        # 600 + 1031.25 - 125 - 161
        assert calculate_bmr(60, 165, 25, "female") == 1345

    def test_bmr_other_uses_female_offset(self):
        assert calculate_bmr(60, 165, 25, "other") == calculate_bmr(60, 165, 25, "female")

    @pytest.mark.parametrize("workouts,factor", [
        (0, 1.2), (1, 1.375), (2, 1.375), (3, 1.55), (5, 1.55), (6, 1.725), (7, 1.725),
    ])
    def test_activity_factor(self, workouts, factor):
        assert activity_factor(workouts) == factor


class TestBodyFat:
    """Body-fat estimate"""

    def test_male_estimate(self):
        # 1.2 * 22.86 + 0.23 * 30 - 16.2 = 18.132
        assert estimate_body_fat(22.86, 30, "male") == 18.1

    def test_female_estimate(self):
        # 1.2 * 22.0 + 0.23 * 30 - 5.4 = 27.9
        assert estimate_body_fat(22.0, 30, "female") == 27.9

    def test_clamped_low(self):
        assert estimate_body_fat(8.0, 16, "male") == 5.0

    def test_clamped_high(self):
        assert estimate_body_fat(60.0, 80, "female") == 50.0


class TestWaistToHip:
    """Waist-to-hip ratio"""

    def test_ratio(self):
        assert waist_to_hip_ratio(80, 100) == 0.8

    def test_missing_measurement(self):
        assert waist_to_hip_ratio(80, None) is None
        assert waist_to_hip_ratio(None, 100) is None


class TestBodyMetricsSnapshot:
    """Snapshot from a profile"""

    def test_snapshot(self, profile):
        metrics = calculate_body_metrics(profile)
        assert metrics.bmi == 22.86
        assert metrics.bmi_category == "Normal weight"
        assert metrics.basal_metabolic_rate == 1649
        assert metrics.daily_calorie_needs == round(1649 * 1.55)
        assert metrics.body_fat_percentage_estimate == 18.1
        assert metrics.waist_to_hip_ratio is None
        assert metrics.circumferences == {}

    def test_circumferences_echoed(self, make_profile):
        profile = make_profile(waist_circumference=80, hip_circumference=100, arm_circumference=32)
        metrics = calculate_body_metrics(profile)
        assert metrics.waist_to_hip_ratio == 0.8
        assert metrics.circumferences == {"waist": 80, "hip": 100, "arm": 32}

    def test_to_dict(self, profile):
        data = calculate_body_metrics(profile).to_dict()
        assert set(data) == {
            "bmi",
            "bmi_category",
            "basal_metabolic_rate",
            "daily_calorie_needs",
            "body_fat_percentage_estimate",
            "waist_to_hip_ratio",
            "circumferences",
        }
