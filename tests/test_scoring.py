"""Tests for candidate scoring."""

import pytest

from spawn_engine.core.candidates import CandidateGenerator
from spawn_engine.core.models import Candidate, Coordinate, map_section_key
from spawn_engine.core.options import SpawnOptions
from spawn_engine.core.scoring import CandidateScorer
from spawn_engine.utils.random import SequenceRandom, create_random_source


def candidate(x, y):
    return Candidate(coordinate=Coordinate(x=x, y=y), map_section_key=map_section_key(x, y))


class TestScoreWeights:
    """Test the composite weighting."""

    def test_default_weights_sum_to_one(self, options):
        scorer = CandidateScorer(options, SequenceRandom([0.5]))
        assert list(scorer.weights) == [0.3, 0.3, 0.2, 0.2]
        assert scorer.weights.sum() == pytest.approx(1.0)

    def test_non_convex_weights_rejected(self):
        with pytest.raises(ValueError):
            SpawnOptions(friend_weight=0.5)


class TestCandidateScorer:
    """Test per-candidate sub-scores and ranking."""

    def test_scores_in_unit_interval(self, options):
        friends = [Coordinate(x=-300, y=800), Coordinate(x=1200, y=-50)]
        rng = create_random_source("scores")
        for region in ("center", "north", "random"):
            candidates = CandidateGenerator(options, rng).generate(region, friends)
            scored = CandidateScorer(options, rng).score(candidates, friends, {"0,0": 40})

            for s in scored:
                for value in (s.score, s.density_score, s.safety_score,
                              s.resource_score, s.friend_score):
                    assert 0.0 <= value <= 1.0

    def test_composite_is_weighted_sum(self, options):
        friends = [Coordinate(x=200, y=200)]
        candidates = CandidateGenerator(options, create_random_source("w")).generate(
            "random", friends
        )
        scored = CandidateScorer(options, create_random_source("w2")).score(candidates, friends)

        for s in scored:
            expected = (0.3 * s.density_score + 0.3 * s.safety_score
                        + 0.2 * s.resource_score + 0.2 * s.friend_score)
            assert s.score == pytest.approx(expected)

    def test_origin_candidate_without_friends(self, options):
        scorer = CandidateScorer(options, SequenceRandom([0.5]))
        [s] = scorer.score([candidate(0, 0)], [])

        assert s.population_density == pytest.approx(0.1)
        assert s.density_score == pytest.approx(0.99)
        assert s.safety_score == pytest.approx(1.0)
        assert s.resource_score == pytest.approx(0.85)
        assert s.friend_score == 0.0
        assert s.score == pytest.approx(0.3 * 0.99 + 0.3 + 0.2 * 0.85)

    def test_safety_falls_off_with_distance(self, options):
        scorer = CandidateScorer(options, SequenceRandom([0.5]))
        [s] = scorer.score([candidate(3000, 4000)], [])
        assert s.safety_score == pytest.approx(0.0)

    def test_resource_score_range(self, options):
        scorer = CandidateScorer(options, SequenceRandom([0.0, 0.999999]))
        low, high = sorted(
            (s.resource_score for s in scorer.score([candidate(0, 0), candidate(0, 0)], [])),
        )
        assert low == pytest.approx(0.7)
        assert 0.99 < high < 1.0

    def test_friend_score_mean_distance(self, options):
        scorer = CandidateScorer(options, SequenceRandom([0.5]))
        [s] = scorer.score([candidate(0, 0)], [Coordinate(x=300, y=400)])
        assert s.friend_score == pytest.approx(0.5)

        [s] = scorer.score(
            [candidate(0, 0)], [Coordinate(x=300, y=400), Coordinate(x=-600, y=-800)]
        )
        assert s.friend_score == pytest.approx(1 - 750 / 1000)

    def test_friend_score_clipped_at_zero(self, options):
        scorer = CandidateScorer(options, SequenceRandom([0.5]))
        [s] = scorer.score([candidate(-2000, 0)], [Coordinate(x=2000, y=0)])
        assert s.friend_score == 0.0

    def test_density_map_drives_density_score(self, options):
        scorer = CandidateScorer(options, SequenceRandom([0.5]))
        scored = scorer.score(
            [candidate(10, 10), candidate(500, 500), candidate(-150, 20)],
            [],
            {"0,0": 5, "-2,0": 25},
        )
        by_key = {s.map_section_key: s for s in scored}

        assert by_key["0,0"].population_density == 5
        assert by_key["0,0"].density_score == pytest.approx(0.5)
        assert by_key["5,5"].population_density == 0
        assert by_key["5,5"].density_score == pytest.approx(1.0)
        assert by_key["-2,0"].density_score == 0.0

    def test_sorted_descending(self, options):
        scorer = CandidateScorer(options, create_random_source("sort"))
        candidates = CandidateGenerator(options, create_random_source("gen")).generate(
            "random", []
        )
        scores = [s.score for s in scorer.score(candidates, [])]
        assert scores == sorted(scores, reverse=True)

    def test_ties_keep_generation_order(self, options):
        """Equal composite scores stay in input order."""
        scorer = CandidateScorer(options, SequenceRandom([0.5]))

        scored = scorer.score([candidate(3, 4), candidate(4, 3)], [])
        assert [s.coordinate for s in scored] == [Coordinate(x=3, y=4), Coordinate(x=4, y=3)]

        scored = scorer.score([candidate(4, 3), candidate(3, 4)], [])
        assert [s.coordinate for s in scored] == [Coordinate(x=4, y=3), Coordinate(x=3, y=4)]

    def test_empty(self, options):
        assert CandidateScorer(options, SequenceRandom([0.5])).score([], []) == []
