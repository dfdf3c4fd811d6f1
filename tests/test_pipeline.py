import pytest

from clusterlab.clustering import InvalidArgumentError, KMeansClusteringPipeline, PALETTE


@pytest.fixture
def pipeline():
    return KMeansClusteringPipeline(max_clusters=5, max_iterations=100, bounds=(500, 500))


def test_run_returns_render_ready_result(pipeline, two_blobs, fixed_rng):
    result = pipeline.run(two_blobs, 2, 30, rng=fixed_rng([0, 2]))

    assert result['labels'] == [0, 0, 1, 1]
    assert len(result['centers']) == 2
    assert result['point_colors'] == [PALETTE[0], PALETTE[0], PALETTE[1], PALETTE[1]]
    assert result['center_colors'] == [PALETTE[0], PALETTE[1]]
    assert result['n_points'] == 4
    assert result['num_clusters'] == 2
    assert result['iterations'] == 30
    assert result['metrics']['cluster_sizes'] == {0: 2, 1: 2}
    assert result['metrics']['empty_cluster_events'] == 0
    assert result['empty_cluster_events'] == 0


def test_duplicate_points_removed(pipeline, fixed_rng):
    result = pipeline.run([[1, 1], [1, 1], [5, 5]], 1, 1, rng=fixed_rng([0]))
    assert result['points'] == [[1.0, 1.0], [5.0, 5.0]]
    assert result['n_points'] == 2
    assert len(result['labels']) == 2


def test_duplicates_kept_when_dedupe_disabled(pipeline):
    result = pipeline.run([[1, 1], [1, 1], [5, 5]], 1, 1, seed=0, dedupe=False)
    assert result['n_points'] == 3


def test_points_clamped_to_canvas(pipeline):
    result = pipeline.run([[600, -3], [10, 10]], 1, 0, seed=0, dedupe=False)
    assert result['points'] == [[500, 0], [10.0, 10.0]]


def test_seed_reproducible(pipeline, two_blobs):
    a = pipeline.run(two_blobs, 2, 10, seed=123)
    b = pipeline.run(two_blobs, 2, 10, seed=123)
    assert a['centers'] == b['centers']
    assert a['labels'] == b['labels']
    assert a['seed'] == 123


@pytest.mark.parametrize("k, iterations", [(0, 10), (6, 10), (2, -1), (2, 101)])
def test_out_of_range_request_rejected(pipeline, two_blobs, k, iterations):
    with pytest.raises(InvalidArgumentError):
        pipeline.run(two_blobs, k, iterations)


def test_empty_points_rejected(pipeline):
    with pytest.raises(InvalidArgumentError):
        pipeline.run([], 1, 10)
