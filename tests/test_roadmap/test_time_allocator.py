"""Tests for proportional week allocation."""

from placement_prep.roadmap.gap_calculator import calculate_skill_gaps
from placement_prep.roadmap.time_allocator import allocate_weeks


class TestAllocateWeeks:
    def test_proportional(self, sample_requirements, sample_ratings):
        gaps = calculate_skill_gaps(sample_requirements, sample_ratings)
        assert allocate_weeks(gaps, 8) == {"DSA": 6, "OOP": 2}

    def test_minimum_one_week(self, req):
        gaps = calculate_skill_gaps([req("BIG", 5), req("TINY", 1)], {"TINY": 1})
        allocation = allocate_weeks(gaps, 4)
        assert allocation["TINY"] == 1

    def test_total_may_exceed_budget(self, sample_requirements, sample_ratings):
        gaps = calculate_skill_gaps(sample_requirements, sample_ratings)
        allocation = allocate_weeks(gaps, 2)
        # 1.5 rounds half up to 2; 0.5 floors to 1
        assert allocation == {"DSA": 2, "OOP": 1}
        assert sum(allocation.values()) > 2

    def test_single_gap_gets_whole_budget(self, req):
        gaps = calculate_skill_gaps([req("A", 5)], {"A": 2})
        assert allocate_weeks(gaps, 4) == {"A": 4}

    def test_empty(self):
        assert allocate_weeks([], 6) == {}
