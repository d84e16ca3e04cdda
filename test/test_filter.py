"""
Condition filter tests.
"""

from multicluster_searcher.searcher.filter import filter_scheduler_clusters


def names(clusters):
    return [cluster.name for cluster in clusters]


class TestFilterSchedulerClusters:
    """Eligibility rules of the condition filter"""

    def test_inactive_clusters_are_dropped(self, make_cluster):
        """Clusters without active schedulers never pass"""
        clusters = [
            make_cluster("empty", active=0),
            make_cluster("down", active=0, inactive=2),
            make_cluster("default-down", is_default=True, active=0),
            make_cluster("up", active=1, inactive=1),
        ]

        assert names(filter_scheduler_clusters({}, clusters)) == ["up"]
        assert names(filter_scheduler_clusters({"security_domain": "A"}, clusters)) == ["up"]

    def test_no_security_domain_matches_all_active(self, make_cluster):
        """Without security_domain every active cluster passes"""
        clusters = [
            make_cluster("a", domains=["A"]),
            make_cluster("b", domains=["B"]),
            make_cluster("open"),
        ]

        assert names(filter_scheduler_clusters({}, clusters)) == ["a", "b", "open"]
        assert names(filter_scheduler_clusters({"security_domain": ""}, clusters)) == ["a", "b", "open"]
        assert names(filter_scheduler_clusters({"idc": "x"}, clusters)) == ["a", "b", "open"]

    def test_security_domain_match(self, make_cluster):
        """Rule domains match case-insensitively"""
        cluster = make_cluster("a", domains=["A"])

        assert names(filter_scheduler_clusters({"security_domain": "B"}, [cluster])) == []
        assert names(filter_scheduler_clusters({"security_domain": "A"}, [cluster])) == ["a"]
        assert names(filter_scheduler_clusters({"security_domain": "a"}, [cluster])) == ["a"]

    def test_default_and_open_clusters_match_any_domain(self, make_cluster):
        """Default clusters and clusters without rules pass any domain"""
        clusters = [
            make_cluster("default", is_default=True, domains=["A"]),
            make_cluster("open"),
            make_cluster("closed", domains=["A"]),
        ]

        assert names(filter_scheduler_clusters({"security_domain": "B"}, clusters)) == ["default", "open"]

    def test_cluster_included_once_with_several_matching_rules(self, make_cluster):
        """A cluster is returned once"""
        cluster = make_cluster("a", domains=["A", "a", "B"])

        assert names(filter_scheduler_clusters({"security_domain": "A"}, [cluster])) == ["a"]

    def test_does_not_mutate_input(self, make_cluster):
        """The input list is left untouched"""
        clusters = [make_cluster("a", active=0), make_cluster("b")]

        filter_scheduler_clusters({}, clusters)

        assert names(clusters) == ["a", "b"]

    def test_security_domain_uses_simple_case_folding(self, make_cluster):
        """Only letter case is ignored, so straße does not equal STRASSE"""
        cluster = make_cluster("german", domains=["straße"])

        assert names(filter_scheduler_clusters({"security_domain": "STRASSE"}, [cluster])) == []
        assert names(filter_scheduler_clusters({"security_domain": "STRAßE"}, [cluster])) == ["german"]
