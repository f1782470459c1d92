import math
import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from scorecard.grading import (  # noqa: E402
    GRADE_BANDS,
    get_grade_color,
    get_percentile_description,
    get_score_color,
    percentile_to_grade,
    score_to_grade,
    score_to_percentile,
)
from scorecard.schemas.grading import GradeBand  # noqa: E402


class PercentileToGradeTests(unittest.TestCase):
    def test_bands_partition_every_integer_percentile(self):
        for percentile in range(0, 101):
            matches = [band.grade for band in GRADE_BANDS if band.contains(percentile)]
            with self.subTest(percentile=percentile):
                self.assertEqual(len(matches), 1)
                self.assertEqual(percentile_to_grade(percentile), matches[0])

    def test_band_edges(self):
        expected = {
            100: "A+",
            97: "A+",
            96: "A",
            95: "A",
            93: "A",
            92: "A-",
            90: "A-",
            89: "B+",
            86: "B",
            82: "B-",
            80: "B-",
            79: "C+",
            76: "C",
            72: "C-",
            70: "C-",
            69: "D",
            60: "D",
            59: "F",
            0: "F",
        }
        for percentile, grade in expected.items():
            with self.subTest(percentile=percentile):
                self.assertEqual(percentile_to_grade(percentile), grade)

    def test_out_of_range_and_non_finite_percentiles(self):
        self.assertEqual(percentile_to_grade(150), "A+")
        self.assertEqual(percentile_to_grade(-5), "F")
        self.assertEqual(percentile_to_grade(math.inf), "A+")
        self.assertEqual(percentile_to_grade(math.nan), "F")

    def test_fallback_for_percentile_between_integer_bands(self):
        self.assertEqual(percentile_to_grade(96.5), "F")

    def test_fallback_when_band_table_is_not_exhaustive(self):
        bands = (GradeBand(min=90, max=100, grade="A"),)
        self.assertEqual(percentile_to_grade(95, bands=bands), "A")
        self.assertEqual(percentile_to_grade(50, bands=bands), "F")
        self.assertEqual(percentile_to_grade(50, bands=()), "F")


class ScoreToGradeTests(unittest.TestCase):
    def test_top_score_reaches_a_plus(self):
        self.assertEqual(score_to_percentile(100), 99)
        self.assertEqual(score_to_grade(100), "A+")

    def test_known_scores(self):
        self.assertEqual(score_to_grade(95), "A+")
        self.assertEqual(score_to_grade(90), "A")
        self.assertEqual(score_to_grade(80), "B")
        self.assertEqual(score_to_grade(75), "B-")
        self.assertEqual(score_to_grade(60), "F")

    def test_matches_manual_composition(self):
        scores = [index * 0.5 for index in range(201)] + [-25, 140, math.nan, math.inf]
        for score in scores:
            with self.subTest(score=score):
                self.assertEqual(score_to_grade(score), percentile_to_grade(score_to_percentile(score)))


class PercentileDescriptionTests(unittest.TestCase):
    def test_ladder_thresholds(self):
        expected = [
            (99, "Exceptional - Top 5% of resumes"),
            (95, "Exceptional - Top 5% of resumes"),
            (94, "Excellent - Top 10% of resumes"),
            (90, "Excellent - Top 10% of resumes"),
            (80, "Very Good - Top 20% of resumes"),
            (70, "Good - Top 30% of resumes"),
            (69.9, "Average - Better than half of resumes"),
            (50, "Average - Better than half of resumes"),
            (30, "Below Average - Needs improvement"),
            (10, "Poor - Significant improvements needed"),
            (9, "Very Poor - Major overhaul required"),
            (0, "Very Poor - Major overhaul required"),
        ]
        for percentile, text in expected:
            with self.subTest(percentile=percentile):
                self.assertEqual(get_percentile_description(percentile), text)

    def test_out_of_range_input_does_not_raise(self):
        self.assertEqual(get_percentile_description(250), "Exceptional - Top 5% of resumes")
        self.assertEqual(get_percentile_description(-20), "Very Poor - Major overhaul required")
        self.assertEqual(get_percentile_description(math.nan), "Very Poor - Major overhaul required")


class ColorTests(unittest.TestCase):
    def test_grade_colors(self):
        expected = {
            "A+": "text-green-600",
            "A": "text-green-600",
            "A-": "text-green-500",
            "B+": "text-green-500",
            "B": "text-yellow-500",
            "B-": "text-yellow-500",
            "C+": "text-orange-500",
            "C": "text-orange-500",
            "C-": "text-red-500",
            "D": "text-red-500",
            "F": "text-red-600",
        }
        for grade, color in expected.items():
            with self.subTest(grade=grade):
                self.assertEqual(get_grade_color(grade), color)
        self.assertEqual(get_grade_color("E"), "text-gray-500")
        self.assertEqual(get_grade_color(""), "text-gray-500")

    def test_every_band_grade_has_a_color(self):
        for band in GRADE_BANDS:
            self.assertNotEqual(get_grade_color(band.grade), "text-gray-500")

    def test_score_colors(self):
        expected = [
            (100, "text-green-600"),
            (90, "text-green-600"),
            (89.9, "text-green-500"),
            (80, "text-green-500"),
            (70, "text-yellow-500"),
            (60, "text-orange-500"),
            (50, "text-red-500"),
            (49, "text-red-600"),
            (-3, "text-red-600"),
            (math.nan, "text-red-600"),
        ]
        for score, color in expected:
            with self.subTest(score=score):
                self.assertEqual(get_score_color(score), color)


if __name__ == "__main__":
    unittest.main()
