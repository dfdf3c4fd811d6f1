"""
K-Means 클러스터링 파이프라인
포인트 정리 -> 클러스터링 -> 평가 -> 색상 지정
"""

import logging
import time
from typing import Any, Dict, Optional, Sequence

import numpy as np

from ..algorithms.kmeans import DEFAULT_LEARNING_RATE, as_points, kmeans
from ..errors import InvalidArgumentError
from ..palette import colors_for
from ..point_store import PointStore, clamp
from .evaluation import evaluate_clustering

logger = logging.getLogger(__name__)


class KMeansClusteringPipeline:
    """캔버스 포인트용 K-Means 파이프라인"""

    def __init__(self,
                 learning_rate: float = DEFAULT_LEARNING_RATE,
                 min_clusters: int = 1,
                 max_clusters: int = 10,
                 max_iterations: int = 1000,
                 bounds: Optional[tuple] = None,
                 verbose: bool = False):
        """
        Parameters:
        -----------
        learning_rate : float
            중심 이동 감쇠 계수
        min_clusters, max_clusters : int
            허용 클러스터 수 범위 (슬라이더 범위)
        max_iterations : int
            요청당 최대 반복 횟수
        bounds : (width, height), optional
            캔버스 크기 (포인트 clamp용)
        verbose : bool
            상세 로그 출력 여부
        """
        self.learning_rate = learning_rate
        self.min_clusters = min_clusters
        self.max_clusters = max_clusters
        self.max_iterations = max_iterations
        self.bounds = bounds
        self.verbose = verbose

    def _validate(self, num_clusters: int, iterations: int) -> None:
        if not self.min_clusters <= num_clusters <= self.max_clusters:
            raise InvalidArgumentError(
                f"클러스터 수는 {self.min_clusters}~{self.max_clusters} 범위여야 합니다: {num_clusters}"
            )
        if not 0 <= iterations <= self.max_iterations:
            raise InvalidArgumentError(
                f"반복 횟수는 0~{self.max_iterations} 범위여야 합니다: {iterations}"
            )

    def run(
        self,
        points: Sequence[Sequence[float]],
        num_clusters: int,
        iterations: int = 10,
        seed: Optional[int] = None,
        dedupe: bool = True,
        rng: Optional[np.random.Generator] = None,
    ) -> Dict[str, Any]:
        """
        클러스터링 수행

        Parameters:
        -----------
        points : sequence of (x, y)
            캔버스에서 수집한 포인트
        num_clusters : int
            클러스터 수
        iterations : int
            반복 횟수
        seed : int, optional
            초기 중심 샘플링 시드
        dedupe : bool
            같은 좌표 중복 제거 여부
        rng : np.random.Generator, optional
            직접 주입할 난수 생성기 (seed보다 우선)

        Returns:
        --------
        dict : 클러스터링 결과
        """
        self._validate(num_clusters, iterations)
        raw = as_points(points).tolist()

        if dedupe:
            store = PointStore(bounds=self.bounds)
            store.extend(raw)
            cleaned = store.to_list()
        elif self.bounds is not None:
            width, height = self.bounds
            cleaned = [[clamp(x, 0, width), clamp(y, 0, height)] for x, y in raw]
        else:
            cleaned = raw

        start = time.time()
        if self.verbose:
            logger.info(
                f"[Pipeline] 클러스터링 시작: 포인트 {len(cleaned)}개 "
                f"(원본 {len(points)}개), k={num_clusters}, 반복={iterations}"
            )

        result = kmeans(
            cleaned,
            num_clusters,
            iterations,
            learning_rate=self.learning_rate,
            rng=rng,
            seed=seed,
        )
        metrics = evaluate_clustering(cleaned, result.labels, result.centers)
        metrics['empty_cluster_events'] = result.empty_cluster_events

        if self.verbose:
            logger.info(
                f"[Pipeline] 클러스터링 완료 ({time.time() - start:.3f}초): "
                f"클러스터 크기={metrics['cluster_sizes']}"
            )
        if result.empty_cluster_events:
            logger.warning(
                f"[Pipeline] 빈 클러스터 발생 {result.empty_cluster_events}회 "
                f"(k={num_clusters}, 포인트 {len(cleaned)}개)"
            )

        return {
            **result.to_dict(),
            'points': cleaned,
            'point_colors': colors_for(result.labels),
            'center_colors': colors_for(range(len(result.centers))),
            'metrics': metrics,
            'n_points': len(cleaned),
            'num_clusters': num_clusters,
            'learning_rate': self.learning_rate,
            'seed': seed,
        }
