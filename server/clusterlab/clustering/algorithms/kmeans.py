"""
K-Means 알고리즘 구현 (감쇠형 업데이트)
중심을 할당된 포인트의 평균 벡터 방향으로 learning_rate만큼만 이동
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence, Tuple

import numpy as np

from ..errors import InvalidArgumentError, NotFittedError
from .base import BaseClusteringAlgorithm

logger = logging.getLogger(__name__)

DEFAULT_LEARNING_RATE = 0.01

Point = Tuple[float, float]


@dataclass(frozen=True)
class ClusterResult:
    """클러스터링 결과 (불변)"""
    centers: Tuple[Point, ...]
    labels: Tuple[int, ...]
    iterations: int
    empty_cluster_events: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'centers': [list(c) for c in self.centers],
            'labels': list(self.labels),
            'iterations': self.iterations,
            'empty_cluster_events': self.empty_cluster_events,
        }


def as_points(points: Sequence[Sequence[float]]) -> np.ndarray:
    """입력 포인트를 (n, 2) float 배열로 변환 및 검증"""
    if points is None or len(points) == 0:
        raise InvalidArgumentError("포인트 집합이 비어 있습니다.")

    try:
        arr = np.array(points, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise InvalidArgumentError(f"포인트 형식이 올바르지 않습니다: {e}") from e

    if arr.ndim != 2 or arr.shape[1] != 2:
        raise InvalidArgumentError(f"포인트는 (x, y) 쌍이어야 합니다: shape={arr.shape}")
    if not np.isfinite(arr).all():
        raise InvalidArgumentError("포인트에 NaN 또는 무한대 값이 있습니다.")

    return arr


def _nearest(points: np.ndarray, centers: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """
    각 포인트의 최근접 중심 계산

    Returns:
    --------
    (labels, vectors)
        labels : (n,) 최근접 중심 인덱스
        vectors : (n, k, 2) 중심 -> 포인트 벡터
    """
    vectors = points[:, np.newaxis, :] - centers[np.newaxis, :, :]
    # 제곱 유클리드 거리 (dx^2 + dy^2), 순서 비교만 필요
    distances = (vectors ** 2).sum(axis=2)
    # argmin은 최소값이 여러 개면 가장 앞 인덱스를 반환
    labels = np.argmin(distances, axis=1)
    return labels, vectors


def assign_labels(points: Sequence[Sequence[float]], centers: Sequence[Sequence[float]]) -> np.ndarray:
    """
    주어진 중심에 대해 포인트 레이블 계산 (중심은 이동하지 않음)

    Parameters:
    -----------
    points : sequence of (x, y)
        레이블을 붙일 포인트
    centers : sequence of (x, y)
        클러스터 중심

    Returns:
    --------
    np.ndarray
        포인트별 중심 인덱스 (거리가 같으면 낮은 인덱스)
    """
    pts = as_points(points)
    if centers is None or len(centers) == 0:
        raise InvalidArgumentError("중심 목록이 비어 있습니다.")
    ctr = as_points(centers)
    labels, _ = _nearest(pts, ctr)
    return labels


def kmeans(
    points: Sequence[Sequence[float]],
    num_centers: int = 1,
    iterations: int = 1,
    *,
    learning_rate: float = DEFAULT_LEARNING_RATE,
    rng: Optional[np.random.Generator] = None,
    seed: Optional[int] = None,
) -> ClusterResult:
    """
    감쇠형 K-Means 클러스터링

    매 반복마다 포인트를 최근접 중심에 할당한 뒤, 각 중심을
    learning_rate * (할당된 벡터 합 / 할당 수) 만큼 이동한다.
    한 번에 무게중심으로 이동하지 않으므로 수렴이 느리다.

    Parameters:
    -----------
    points : sequence of (x, y)
        입력 포인트 (중복 제거는 호출자 책임)
    num_centers : int
        클러스터 수 (>= 1)
    iterations : int
        반복 횟수 (>= 0, 0이면 초기 중심 그대로 반환)
    learning_rate : float
        중심 이동 감쇠 계수
    rng : np.random.Generator, optional
        초기 중심 샘플링용 난수 생성기
    seed : int, optional
        rng가 없을 때 사용할 시드

    Returns:
    --------
    ClusterResult
        최종 중심, 마지막 반복의 레이블

    Raises:
    -------
    InvalidArgumentError
        빈 포인트, num_centers < 1, iterations < 0 등
    """
    pts = as_points(points)

    if isinstance(num_centers, bool) or not isinstance(num_centers, (int, np.integer)):
        raise InvalidArgumentError(f"num_centers는 정수여야 합니다: {num_centers!r}")
    if num_centers < 1:
        raise InvalidArgumentError(f"num_centers는 1 이상이어야 합니다: {num_centers}")
    if isinstance(iterations, bool) or not isinstance(iterations, (int, np.integer)):
        raise InvalidArgumentError(f"iterations는 정수여야 합니다: {iterations!r}")
    if iterations < 0:
        raise InvalidArgumentError(f"iterations는 0 이상이어야 합니다: {iterations}")
    if not np.isfinite(learning_rate) or learning_rate <= 0:
        raise InvalidArgumentError(f"learning_rate는 양수여야 합니다: {learning_rate}")

    if rng is None:
        rng = np.random.default_rng(seed)

    n = len(pts)
    k = int(num_centers)

    # 초기 중심: 복원 추출, 원본과 메모리 공유하지 않도록 복사
    init_idx = rng.integers(0, n, size=k)
    centers = pts[init_idx].copy()

    empty_events = 0
    labels = None

    for i in range(iterations):
        labels, vectors = _nearest(pts, centers)

        assigned = vectors[np.arange(n), labels]
        sums = np.zeros((k, 2))
        np.add.at(sums, labels, assigned)
        counts = np.bincount(labels, minlength=k)

        # 할당된 포인트가 없는 중심은 이번 반복에서 이동하지 않음
        active = counts > 0
        centers[active] += learning_rate * (sums[active] / counts[active][:, np.newaxis])

        n_empty = int(k - active.sum())
        if n_empty:
            empty_events += n_empty
            logger.debug(f"[KMeans] 반복 {i}: 빈 클러스터 {n_empty}개, 중심 고정")

    if labels is None:
        # iterations == 0: 중심 이동 없이 할당만 한 번 수행
        labels, _ = _nearest(pts, centers)

    return ClusterResult(
        centers=tuple((float(x), float(y)) for x, y in centers),
        labels=tuple(int(l) for l in labels),
        iterations=int(iterations),
        empty_cluster_events=empty_events,
    )


class GradientKMeansAlgorithm(BaseClusteringAlgorithm):
    """감쇠형 K-Means 클러스터링 알고리즘"""

    def __init__(self,
                 n_clusters: int = 1,
                 iterations: int = 10,
                 learning_rate: float = DEFAULT_LEARNING_RATE,
                 seed: Optional[int] = None):
        """
        Parameters:
        -----------
        n_clusters : int
            클러스터 수
        iterations : int
            반복 횟수
        learning_rate : float
            중심 이동 감쇠 계수
        seed : int, optional
            초기 중심 샘플링 시드
        """
        self.n_clusters = n_clusters
        self.iterations = iterations
        self.learning_rate = learning_rate
        self.seed = seed
        self.result_: Optional[ClusterResult] = None
        self.fit_params_: Dict[str, Any] = {}

    @property
    def centers_(self) -> Optional[np.ndarray]:
        if self.result_ is None:
            return None
        return np.array(self.result_.centers)

    @property
    def labels_(self) -> Optional[np.ndarray]:
        if self.result_ is None:
            return None
        return np.array(self.result_.labels)

    def fit(self, X: np.ndarray, **kwargs) -> 'GradientKMeansAlgorithm':
        """모델 학습 (kwargs로 생성자 파라미터를 이번 학습에 한해 덮어씀)"""
        learning_rate = kwargs.get('learning_rate', self.learning_rate)
        seed = kwargs.get('seed', self.seed)
        self.result_ = kmeans(
            X,
            kwargs.get('n_clusters', self.n_clusters),
            kwargs.get('iterations', self.iterations),
            learning_rate=learning_rate,
            rng=kwargs.get('rng'),
            seed=seed,
        )
        # 실제 학습에 사용된 파라미터
        self.fit_params_ = {'learning_rate': learning_rate, 'seed': seed}
        return self

    def predict(self, X: np.ndarray) -> np.ndarray:
        """학습된 중심 기준 클러스터 예측"""
        if self.result_ is None:
            raise NotFittedError("모델이 학습되지 않았습니다. fit()을 먼저 호출하세요.")
        return assign_labels(X, self.result_.centers)

    def fit_predict(self, X: np.ndarray, **kwargs) -> np.ndarray:
        """학습 및 예측"""
        self.fit(X, **kwargs)
        return self.labels_

    def get_algorithm_info(self) -> Dict[str, Any]:
        """알고리즘 정보 반환 (학습 후에는 실제 사용된 파라미터)"""
        if self.result_ is None:
            n_clusters, iterations = self.n_clusters, self.iterations
        else:
            n_clusters, iterations = len(self.result_.centers), self.result_.iterations
        return {
            'type': 'GradientKMeans',
            'n_clusters': n_clusters,
            'iterations': iterations,
            'learning_rate': self.fit_params_.get('learning_rate', self.learning_rate),
            'seed': self.fit_params_.get('seed', self.seed),
            'is_fitted': self.result_ is not None,
            'empty_cluster_events': self.result_.empty_cluster_events if self.result_ else None,
        }
