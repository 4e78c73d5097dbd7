"""Unit tests for the 15-week prompt catalog and the 30-day catalog."""
import pytest

from cringeshield.catalog.challenge_days import (
    BADGE_MILESTONES,
    CHALLENGE_DAYS,
    MILESTONE_BADGES,
    get_challenge_day,
    is_valid_day,
    is_valid_milestone,
)
from cringeshield.catalog.weekly_prompts import (
    ALL_WEEKLY_PROMPTS,
    WeeklyChallengeTier,
    get_prompt_by_id,
    get_prompts,
    is_valid_tier,
    is_valid_week,
    make_prompt_id,
    parse_tier,
    prompt_ids_for_week,
    prompts_for_tier,
)


@pytest.mark.unit
class TestWeeklyCatalog:
    @pytest.mark.parametrize("tier", list(WeeklyChallengeTier))
    def test_each_tier_has_45_prompts(self, tier):
        assert len(prompts_for_tier(tier)) == 45

    @pytest.mark.parametrize("tier", list(WeeklyChallengeTier))
    def test_three_prompts_every_week(self, tier):
        for week in range(1, 16):
            prompts = get_prompts(week, tier)
            assert [p.order for p in prompts] == [1, 2, 3]

    def test_ids_are_unique(self):
        ids = [p.id for p in ALL_WEEKLY_PROMPTS]
        assert len(ids) == len(set(ids)) == 135

    def test_id_format(self):
        assert make_prompt_id(WeeklyChallengeTier.GROWING_SPEAKER, 3, 1) == "growing_w3_p1"
        prompt = get_prompt_by_id("growing_w3_p1")
        assert prompt is not None
        assert prompt.tier is WeeklyChallengeTier.GROWING_SPEAKER
        assert (prompt.week, prompt.order) == (3, 1)

    def test_unknown_id(self):
        assert get_prompt_by_id("growing_w16_p1") is None
        assert get_prompt_by_id("") is None

    def test_get_prompts_out_of_range_is_empty(self):
        assert get_prompts(16, "shy_starter") == []
        assert get_prompts(0, "shy_starter") == []

    def test_prompt_ids_for_week(self):
        assert prompt_ids_for_week("shy_starter", 1) == {"shy_w1_p1", "shy_w1_p2", "shy_w1_p3"}

    def test_first_week_titles(self):
        assert get_prompt_by_id("shy_w1_p1").title is not None
        assert get_prompt_by_id("shy_w2_p1").title is None


@pytest.mark.unit
class TestValidators:
    def test_parse_tier(self):
        assert parse_tier("confident_creator") is WeeklyChallengeTier.CONFIDENT_CREATOR
        assert parse_tier("expert") is None
        assert parse_tier(None) is None
        assert not is_valid_tier(3)

    @pytest.mark.parametrize("week,ok", [(1, True), (15, True), (0, False), (16, False), (True, False), (2.0, False), ("2", False)])
    def test_is_valid_week(self, week, ok):
        assert is_valid_week(week) is ok

    @pytest.mark.parametrize("day,ok", [(1, True), (30, True), (0, False), (31, False), (False, False), (5.5, False)])
    def test_is_valid_day(self, day, ok):
        assert is_valid_day(day) is ok

    @pytest.mark.parametrize("milestone,ok", [(7, True), (15, True), (30, True), (10, False), (True, False)])
    def test_is_valid_milestone(self, milestone, ok):
        assert is_valid_milestone(milestone) is ok


@pytest.mark.unit
class TestChallengeDays:
    def test_thirty_days_in_order(self):
        assert [d.day for d in CHALLENGE_DAYS] == list(range(1, 31))

    def test_get_challenge_day(self):
        assert get_challenge_day(1).day == 1
        assert get_challenge_day(31) is None

    def test_every_milestone_has_badge_info(self):
        assert set(MILESTONE_BADGES) == set(BADGE_MILESTONES) == {7, 15, 30}
        assert MILESTONE_BADGES[30].name == "Challenge Conqueror"
