import math

import pytest

from config import settings
from models.schemas.riasec import RiasecProfile
from services.errors import ValidationError
from services.profession_matcher import (
    MAX_DISTANCE,
    rank_professions,
    riasec_similarity,
    skills_similarity,
)

ZEROS = {}
HUNDREDS = {
    "realistic": 100, "investigative": 100, "artistic": 100,
    "social": 100, "enterprising": 100, "conventional": 100,
}


def test_max_distance():
    assert MAX_DISTANCE == pytest.approx(math.sqrt(6) * 100, abs=1e-9)


class TestRiasecSimilarity:
    def test_identical_profiles(self):
        p = RiasecProfile(realistic=80, investigative=20, artistic=55, social=10, enterprising=0, conventional=100)
        assert riasec_similarity(p, p) == 100.0

    def test_opposite_corners(self):
        assert riasec_similarity(RiasecProfile(**ZEROS), RiasecProfile(**HUNDREDS)) == pytest.approx(0.0, abs=1e-9)

    def test_symmetric(self):
        a = RiasecProfile(realistic=70, social=30)
        b = RiasecProfile(artistic=40, conventional=90)
        assert riasec_similarity(a, b) == riasec_similarity(b, a)

    def test_single_axis_difference(self):
        a = RiasecProfile(realistic=100)
        b = RiasecProfile()
        expected = 100 * (1 - 100 / (math.sqrt(6) * 100))
        assert riasec_similarity(a, b) == pytest.approx(expected)


class TestSkillsSimilarity:
    def test_no_required_skills(self):
        assert skills_similarity(["python"], []) == 100.0
        assert skills_similarity([], []) == 100.0

    def test_user_without_skills(self):
        assert skills_similarity([], ["python", "sql"]) == 0.0

    def test_case_insensitive(self):
        assert skills_similarity(["  Python", "SQL"], ["python", "sql"]) == 100.0

    def test_partial_overlap(self):
        assert skills_similarity(["python", "excel"], ["python", "sql"]) == 50.0

    def test_duplicate_required_skills_count_once(self):
        assert skills_similarity(["python"], ["Python", "python", "sql"]) == 50.0


class TestRankProfessions:
    def test_concrete_scenario(self, make_profession):
        profile = RiasecProfile(realistic=100)
        welder = make_profession(1, {"realistic": 100}, ["wrench"], name="Welder")
        matches = rank_professions(profile, ["wrench", "welding"], [welder])
        assert matches[0].profession.name == "Welder"
        assert matches[0].riasec_match == 100.0
        assert matches[0].skills_match == 100.0
        assert matches[0].match_percentage == pytest.approx(100.0, abs=1e-9)

    def test_weight_contract(self, make_profession):
        profile = RiasecProfile(realistic=60, investigative=30, social=80)
        catalog = [
            make_profession(1, {"realistic": 90, "social": 20}, ["a", "b"]),
            make_profession(2, {"investigative": 70}, ["b", "c", "d"]),
            make_profession(3, {"social": 100, "artistic": 40}, []),
            make_profession(4, HUNDREDS, ["z"]),
        ]
        for m in rank_professions(profile, ["B", "c"], catalog, riasec_weight=0.7):
            assert m.match_percentage == pytest.approx(0.7 * m.riasec_match + 0.3 * m.skills_match, abs=1e-9)

    def test_sorted_descending(self, make_profession):
        profile = RiasecProfile(artistic=90, social=60)
        catalog = [make_profession(i, {"artistic": i * 10, "social": 100 - i * 10}) for i in range(1, 10)]
        matches = rank_professions(profile, [], catalog)
        scores = [m.match_percentage for m in matches]
        assert scores == sorted(scores, reverse=True)
        assert len(matches) == len(catalog)

    def test_tie_broken_by_riasec_then_id(self, make_profession):
        profile = RiasecProfile()
        # Both score exactly 50 at an even split
        close_fit = make_profession(9, ZEROS, ["missing skill"])
        skills_fit = make_profession(3, HUNDREDS, [])
        twin = make_profession(7, ZEROS, ["missing skill"])

        matches = rank_professions(profile, [], [skills_fit, twin, close_fit], riasec_weight=0.5)
        assert [m.match_percentage for m in matches] == [50.0, 50.0, 50.0]
        assert [m.profession.id for m in matches] == [7, 9, 3]

    def test_identical_entries_ordered_by_id(self, make_profession):
        catalog = [make_profession(i, {"social": 50}) for i in (5, 2, 8, 1)]
        matches = rank_professions(RiasecProfile(social=40), [], catalog)
        assert [m.profession.id for m in matches] == [1, 2, 5, 8]

    def test_deterministic(self, make_profession):
        profile = RiasecProfile(realistic=33.3, conventional=66.6)
        catalog = [make_profession(i, {"realistic": i * 7, "conventional": 100 - i * 5}, ["x"]) for i in range(1, 15)]
        first = rank_professions(profile, ["x"], catalog)
        second = rank_professions(profile, ["x"], catalog)
        assert [m.model_dump() for m in first] == [m.model_dump() for m in second]

    def test_default_weight_comes_from_settings(self, make_profession, monkeypatch):
        monkeypatch.setattr(settings, "riasec_weight", 1.0)
        matches = rank_professions(RiasecProfile(), [], [make_profession(1, ZEROS, ["python"])])
        assert matches[0].match_percentage == 100.0

    def test_skills_only_weight(self, make_profession):
        matches = rank_professions(RiasecProfile(), ["python"], [make_profession(1, HUNDREDS, ["python"])],
                                   riasec_weight=0.0)
        assert matches[0].match_percentage == 100.0

    def test_empty_user_skills_do_not_fail(self, make_profession):
        matches = rank_professions(RiasecProfile(), [], [make_profession(1, ZEROS, ["python"])])
        assert matches[0].skills_match == 0.0


class TestRankValidation:
    def test_empty_catalog(self):
        with pytest.raises(ValidationError, match="empty"):
            rank_professions(RiasecProfile(), [], [])

    @pytest.mark.parametrize("value", [-0.1, 100.5, float("nan"), float("inf")])
    def test_profile_out_of_range(self, make_profession, value):
        with pytest.raises(ValidationError):
            rank_professions(RiasecProfile(social=value), [], [make_profession(1)])

    @pytest.mark.parametrize("weight", [-0.1, 1.5])
    def test_weight_out_of_range(self, make_profession, weight):
        with pytest.raises(ValidationError):
            rank_professions(RiasecProfile(), [], [make_profession(1)], riasec_weight=weight)
