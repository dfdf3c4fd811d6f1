import pytest

from clusterlab.clustering import evaluate_clustering


def test_two_separated_clusters(two_blobs):
    metrics = evaluate_clustering(two_blobs, [0, 0, 1, 1], [[0, 0.5], [10, 10.5]])

    assert metrics['cluster_sizes'] == {0: 2, 1: 2}
    assert metrics['n_clusters'] == 2
    assert metrics['inertia'] == pytest.approx(1.0)
    assert metrics['silhouette'] > 0.9
    assert metrics['davies_bouldin'] < 0.2
    assert metrics['calinski_harabasz'] > 100


def test_single_cluster_skips_scores(two_blobs):
    metrics = evaluate_clustering(two_blobs, [0, 0, 0, 0])

    assert metrics['cluster_sizes'] == {0: 4}
    assert metrics['inertia'] is None
    assert metrics['silhouette'] is None
    assert metrics['davies_bouldin'] is None
    assert metrics['calinski_harabasz'] is None


def test_one_point_per_cluster_skips_scores(two_blobs):
    metrics = evaluate_clustering(two_blobs, [0, 1, 2, 3], two_blobs)

    assert metrics['n_clusters'] == 4
    assert metrics['inertia'] == 0
    assert metrics['silhouette'] is None


def test_unused_label_indices_not_counted():
    metrics = evaluate_clustering([[0, 0], [1, 1], [5, 5]], [0, 0, 3])
    assert metrics['cluster_sizes'] == {0: 2, 3: 1}
    assert metrics['n_clusters'] == 2
