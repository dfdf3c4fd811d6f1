import numpy as np
import pytest


class FixedIndexRng:
    """초기 중심 인덱스를 고정하는 난수 생성기 대체"""

    def __init__(self, indices):
        self.indices = list(indices)

    def integers(self, low, high, size=None):
        assert size == len(self.indices)
        assert all(low <= i < high for i in self.indices)
        return np.array(self.indices)


@pytest.fixture
def fixed_rng():
    return FixedIndexRng


@pytest.fixture
def two_blobs():
    return [[0, 0], [0, 1], [10, 10], [10, 11]]
