"""Unit tests for the outlier reporter."""
import pytest

from foefinder.schemas.analytics import QuestionStatistics
from foefinder.services.outliers import find_outliers, percentile_label, percentile_rank
from foefinder.services.population_stats import aggregate
from tests.conftest import make_answer_set


@pytest.fixture
def stats(small_catalog, ten_user_population):
    return aggregate(ten_user_population, small_catalog)


class TestPercentileRank:
    """Rank is the share of responses at or below the value."""

    def test_split_question(self, stats):
        assert percentile_rank(1, stats[2]) == 50.0
        assert percentile_rank(4, stats[2]) == 50.0
        assert percentile_rank(7, stats[2]) == 100.0

    def test_concentrated_question(self, stats):
        assert percentile_rank(1, stats[1]) == 10.0
        assert percentile_rank(3, stats[1]) == 10.0
        assert percentile_rank(4, stats[1]) == 90.0


class TestFindOutliers:

    def test_bottom_outlier(self, stats, small_catalog):
        outliers = find_outliers(make_answer_set([(1, 1)]), stats, small_catalog)
        assert len(outliers) == 1
        outlier = outliers[0]
        assert outlier.is_bottom_outlier
        assert not outlier.is_top_outlier
        assert outlier.percentile_rank == 10.0
        assert outlier.question_text == "Statement 1"
        assert outlier.response_count == 10

    def test_top_outlier(self, stats):
        outliers = find_outliers(make_answer_set([(1, 7), (2, 7)]), stats)
        assert [o.question_id for o in outliers] == [1, 2]
        assert all(o.is_top_outlier for o in outliers)
        assert outliers[0].question_text == ""

    def test_middle_of_split_is_not_outlier(self, stats):
        assert find_outliers(make_answer_set([(2, 1)]), stats) == []

    def test_small_sample_skipped(self, small_catalog, scenario_b_population):
        """Four responses are too few for percentile claims."""
        stats = aggregate(scenario_b_population, small_catalog)
        assert find_outliers(make_answer_set([(1, 7)]), stats) == []
        assert len(find_outliers(make_answer_set([(1, 7)]), stats, min_responses=4)) == 1

    def test_unanswered_by_population_skipped(self, stats):
        assert find_outliers(make_answer_set([(3, 7)]), stats) == []

    def test_carries_population_context(self, stats):
        outlier = find_outliers(make_answer_set([(2, 7)]), stats)[0]
        assert outlier.population_mean == pytest.approx(4.0)
        assert outlier.std_dev == pytest.approx(3.0)


class TestLabel:

    def test_labels(self, stats):
        top = find_outliers(make_answer_set([(2, 7)]), stats)[0]
        bottom = find_outliers(make_answer_set([(1, 1)]), stats)[0]
        assert percentile_label(top) == "Top 0%"
        assert percentile_label(bottom) == "Bottom 10%"


def _stats(distribution):
    count = sum(distribution.values())
    return {
        1: QuestionStatistics(
            question_id=1,
            count=count,
            mean=4.0,
            std_dev=1.0,
            p10=4, p25=4, p50=4, p75=4, p90=4,
            min=min(v for v, n in distribution.items() if n),
            max=max(v for v, n in distribution.items() if n),
            distribution=distribution,
        )
    }


class TestThresholdBoundaries:
    """Thresholds apply to the exact share, not the rounded display rank."""

    def test_just_below_top_threshold(self):
        """1800 of 2001 is 89.955%, displayed as 90.0 but not an outlier."""
        stats = _stats({4: 1800, 7: 201})
        assert percentile_rank(4, stats[1]) == 90.0
        assert find_outliers(make_answer_set([(1, 4)]), stats) == []

    def test_just_above_bottom_threshold(self):
        """201 of 2001 is 10.045%, displayed as 10.0 but not an outlier."""
        stats = _stats({1: 201, 4: 1800})
        assert percentile_rank(1, stats[1]) == 10.0
        assert find_outliers(make_answer_set([(1, 1)]), stats) == []

    def test_exact_thresholds_are_inclusive(self):
        stats = _stats({1: 200, 4: 1600, 7: 200})
        bottom = find_outliers(make_answer_set([(1, 1)]), stats)
        top = find_outliers(make_answer_set([(1, 4)]), stats)
        assert bottom[0].is_bottom_outlier
        assert top[0].is_top_outlier
        assert top[0].percentile_rank == 90.0
