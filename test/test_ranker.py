"""
Cluster ranker tests.
"""

import logging

import pytest

from multicluster_searcher.searcher.ranker import (
    ClusterScore,
    rank_cluster_scores,
    rank_scheduler_clusters,
    score_scheduler_clusters,
)


def names(clusters):
    return [cluster.name for cluster in clusters]


class TestRankClusterScores:
    """Ordering of precomputed scores"""

    def test_descending(self, make_cluster):
        """The higher score is ranked first"""
        low = ClusterScore(cluster=make_cluster("low"), score=0.3)
        high = ClusterScore(cluster=make_cluster("high"), score=0.7)

        assert [item.cluster.name for item in rank_cluster_scores([low, high])] == ["high", "low"]

    def test_ties_keep_input_order(self, make_cluster):
        """Equal scores keep their input order"""
        scores = [ClusterScore(cluster=make_cluster(name), score=0.5) for name in ("a", "b", "c")]

        assert [item.cluster.name for item in rank_cluster_scores(scores)] == ["a", "b", "c"]

    def test_unscored_cluster_keeps_its_index(self, make_cluster):
        """A cluster without a score stays in place and the others are still ranked"""
        scores = [
            ClusterScore(cluster=make_cluster("low"), score=0.1),
            ClusterScore(cluster=make_cluster("broken"), score=None),
            ClusterScore(cluster=make_cluster("high"), score=0.9),
        ]

        ranked = [item.cluster.name for item in rank_cluster_scores(scores)]

        assert ranked == ["high", "broken", "low"]

    def test_several_unscored_clusters(self, make_cluster):
        """Scored clusters are ranked among the free slots around unscored ones"""
        scores = [
            ClusterScore(cluster=make_cluster("broken-1"), score=None),
            ClusterScore(cluster=make_cluster("a"), score=0.1),
            ClusterScore(cluster=make_cluster("b"), score=0.2),
            ClusterScore(cluster=make_cluster("broken-2"), score=None),
            ClusterScore(cluster=make_cluster("c"), score=0.3),
        ]

        ranked = [item.cluster.name for item in rank_cluster_scores(scores)]

        assert ranked == ["broken-1", "c", "b", "broken-2", "a"]

    def test_empty(self):
        """Nothing to rank"""
        assert rank_cluster_scores([]) == []


class TestRankSchedulerClusters:
    """Ranking of scheduler clusters end to end"""

    def test_higher_score_first(self, make_cluster):
        """CIDR affinity outweighs IDC affinity"""
        clusters = [
            make_cluster("near-idc", scopes={"idc": "x"}),
            make_cluster("near-cidr", scopes={"cidrs": ["10.0.0.0/24"]}),
        ]

        ranked = rank_scheduler_clusters(clusters, "10.0.0.1", "", {"idc": "x"})

        assert names(ranked) == ["near-cidr", "near-idc"]

    def test_location_prefix_orders_clusters(self, make_cluster):
        """Longer location prefixes rank higher"""
        clusters = [
            make_cluster("region", scopes={"location": "r1|z9"}),
            make_cluster("rack", scopes={"location": "r1|z1|rack1"}),
            make_cluster("zone", scopes={"location": "r1|z1|rack2"}),
            make_cluster("other", scopes={"location": "r2"}),
        ]

        ranked = rank_scheduler_clusters(clusters, "", "", {"location": "r1|z1|rack1"})

        assert names(ranked) == ["rack", "zone", "region", "other"]

    def test_undecodable_scopes_do_not_disturb_ranking(self, make_cluster, caplog):
        """A cluster with broken scopes is kept and logged, the healthy ones stay ordered"""
        clusters = [
            make_cluster("low"),
            make_cluster("broken", scopes="idc=x"),
            make_cluster("high", scopes={"idc": "x"}),
        ]

        with caplog.at_level(logging.ERROR):
            ranked = rank_scheduler_clusters(clusters, "", "", {"idc": "x"})

        assert names(ranked) == ["high", "broken", "low"]
        assert "broken decode scopes failed" in caplog.text

    def test_does_not_mutate_input(self, make_cluster):
        """The input list keeps its order"""
        clusters = [make_cluster("low"), make_cluster("high", is_default=True)]

        ranked = rank_scheduler_clusters(clusters, "", "", {})

        assert names(ranked) == ["high", "low"]
        assert names(clusters) == ["low", "high"]


class TestScoreSchedulerClusters:
    """Per-cluster scoring before the sort"""

    def test_scores(self, make_cluster):
        """Scores match the weighted sub-scores, broken scopes score None"""
        clusters = [
            make_cluster("default", is_default=True, scopes={}),
            make_cluster("edge", scopes={"cidrs": ["10.0.0.0/24"], "idc": "x"}),
            make_cluster("broken", scopes={"cidrs": "10.0.0.0/24"}),
        ]

        scores = {item.cluster.name: item.score for item in
                  score_scheduler_clusters(clusters, "10.0.0.9", "", {"idc": "x"})}

        assert scores["default"] == pytest.approx(0.05)
        assert scores["edge"] == pytest.approx(0.45)
        assert scores["broken"] is None
