#!/usr/bin/env python3
"""
Test suite for the CV readiness score.
"""

import unittest

from core.cv import CvData, ProjectEntry
from core.scorer import compute_cv_score, ScoreLevel
from core.scorer.service import (
    GATE_MESSAGE,
    MAX_FIXES,
    level_for_score,
    prioritize_fixes,
)
from tests.fixtures.cv_fixtures import make_full_cv, make_experience, SKILLS_12


class TestComputeCvScore(unittest.TestCase):
    """End-to-end scoring scenarios."""

    def test_empty_cv_is_gated_needs_improvement(self):
        result = compute_cv_score(CvData())

        self.assertGreaterEqual(result.score, 0)
        self.assertLessEqual(result.score, 5)
        self.assertEqual(result.level, ScoreLevel.NEEDS_IMPROVEMENT)
        self.assertTrue(result.is_gated)
        self.assertEqual(result.gate_message, GATE_MESSAGE)

    def test_none_is_treated_as_empty_cv(self):
        result = compute_cv_score(None)

        self.assertEqual(result.score, 0)
        self.assertTrue(result.is_gated)

    def test_empty_cv_fixes_prioritized_and_truncated(self):
        result = compute_cv_score(CvData())

        self.assertEqual(result.fixes, [
            "Add a professional summary (60-100 words)",
            "Add at least 2 work experiences",
            "Add more skills (currently 0, target: 10+)",
            "Add your email address and phone number",
            "Add your education details",
        ])

    def test_full_cv_is_strong(self):
        result = compute_cv_score(make_full_cv())

        self.assertGreaterEqual(result.score, 80)
        self.assertLessEqual(result.score, 100)
        self.assertEqual(result.level, ScoreLevel.STRONG)
        self.assertFalse(result.is_gated)
        self.assertIsNone(result.gate_message)

    def test_full_cv_breakdown(self):
        result = compute_cv_score(make_full_cv())

        self.assertEqual(result.completion_score, 60)
        self.assertEqual(result.quality_score, 35)
        self.assertEqual(result.score, 95)
        self.assertEqual(result.fixes, ["Consider adding projects, certifications, or languages"])

    def test_summary_past_100_words_loses_completion_band(self):
        result = compute_cv_score(make_full_cv(summary=" ".join(["engineer"] * 120)))

        self.assertEqual(result.completion_score, 47)
        self.assertEqual(result.quality_score, 30)
        self.assertEqual(result.score, 77)
        self.assertEqual(result.level, ScoreLevel.GOOD)
        self.assertEqual(result.fixes, [
            "Add a professional summary (60-100 words recommended, currently 120)",
            "Consider adding projects, certifications, or languages",
        ])

    def test_additional_sections_rounded_half_up(self):
        cv = make_full_cv(
            projects=[ProjectEntry(name="Open banking toolkit", description="Library for PSD2 consent flows")],
            languages=["English (native)", "Spanish (fluent)"],
        )

        result = compute_cv_score(cv)

        # 35 + 2 * 1.25 = 37.5
        self.assertEqual(result.quality_score, 38)
        self.assertEqual(result.score, 98)
        self.assertEqual(result.fixes, [])

    def test_placeholder_summary_triggers_gate(self):
        result = compute_cv_score(make_full_cv(summary="i work hard"))

        self.assertTrue(result.is_gated)
        self.assertLessEqual(result.score, 15)
        self.assertIn("Add a professional summary (60-100 words)", result.fixes)

    def test_gate_caps_high_total(self):
        # Everything else is complete, only 2 skills
        result = compute_cv_score(make_full_cv(skills=SKILLS_12[:2]))

        self.assertEqual(result.completion_score, 50)
        self.assertEqual(result.score, 15)
        self.assertTrue(result.is_gated)
        self.assertEqual(result.level, ScoreLevel.NEEDS_IMPROVEMENT)

    def test_gate_without_qualifying_experience(self):
        result = compute_cv_score(make_full_cv(experience=[]))

        self.assertTrue(result.is_gated)
        self.assertEqual(result.score, 15)

    def test_placeholder_skills_do_not_count_towards_gate(self):
        skills = ["Python", "SQL", "Go", "Enter your skill", SKILLS_12[0], SKILLS_12[1]]

        result = compute_cv_score(make_full_cv(skills=skills))

        self.assertTrue(result.is_gated)
        self.assertIn("Add more skills (currently 2, target: 10+)", result.fixes)

    def test_score_is_sum_of_parts_when_not_gated(self):
        cvs = [
            make_full_cv(),
            make_full_cv(skills=SKILLS_12[:7]),
            make_full_cv(experience=[make_experience()]),
            make_full_cv(education=[]),
        ]
        for cv in cvs:
            result = compute_cv_score(cv)
            self.assertFalse(result.is_gated)
            self.assertEqual(result.score, min(100, max(0, result.completion_score + result.quality_score)))

    def test_score_ranges_and_fix_limit(self):
        cvs = [
            CvData(),
            make_full_cv(),
            make_full_cv(summary=""),
            make_full_cv(experience=[make_experience(bullets=[])]),
            make_full_cv(skills=[]),
        ]
        for cv in cvs:
            result = compute_cv_score(cv)
            self.assertTrue(0 <= result.score <= 100)
            self.assertTrue(0 <= result.completion_score <= 60)
            self.assertTrue(0 <= result.quality_score <= 40)
            self.assertLessEqual(len(result.fixes), MAX_FIXES)

    def test_adding_qualifying_experience_never_lowers_completion(self):
        bases = [
            CvData(),
            make_full_cv(experience=[]),
            make_full_cv(experience=[make_experience(bullets=["Led teams"])]),
            make_full_cv(),
        ]
        for cv in bases:
            before = compute_cv_score(cv).completion_score
            extended = cv.model_copy(update={'experience': cv.experience + [make_experience()]})
            after = compute_cv_score(extended).completion_score
            self.assertGreaterEqual(after, before)

    def test_to_dict_uses_camel_case(self):
        data = compute_cv_score(CvData()).to_dict()

        self.assertEqual(
            set(data),
            {'score', 'completionScore', 'qualityScore', 'level', 'fixes', 'isGated', 'gateMessage'}
        )
        self.assertEqual(data['level'], "Needs Improvement")


class TestScoreHelpers(unittest.TestCase):

    def test_level_thresholds(self):
        self.assertEqual(level_for_score(100), ScoreLevel.STRONG)
        self.assertEqual(level_for_score(80), ScoreLevel.STRONG)
        self.assertEqual(level_for_score(79), ScoreLevel.GOOD)
        self.assertEqual(level_for_score(55), ScoreLevel.GOOD)
        self.assertEqual(level_for_score(54), ScoreLevel.NEEDS_IMPROVEMENT)
        self.assertEqual(level_for_score(0), ScoreLevel.NEEDS_IMPROVEMENT)

    def test_prioritize_fixes_moves_essentials_first(self):
        fixes = [
            "Add your email address",
            "Add more skills (currently 2, target: 10+)",
            "Ensure your full name is present",
            "Expand summary to 60-100 words (currently 45)",
        ]

        self.assertEqual(prioritize_fixes(fixes), [
            "Add more skills (currently 2, target: 10+)",
            "Expand summary to 60-100 words (currently 45)",
            "Add your email address",
            "Ensure your full name is present",
        ])

    def test_prioritize_fixes_keyword_match_is_case_sensitive(self):
        fixes = [
            "Add your email address",
            "Summary too short - expand to 60-100 words (currently 25)",
            "Add at least one more work experience",
        ]

        self.assertEqual(prioritize_fixes(fixes), [
            "Add at least one more work experience",
            "Add your email address",
            "Summary too short - expand to 60-100 words (currently 25)",
        ])

    def test_prioritize_fixes_truncates(self):
        fixes = [f"Fix number {i}" for i in range(8)]

        self.assertEqual(prioritize_fixes(fixes), fixes[:5])


if __name__ == '__main__':
    unittest.main()
