"""
클러스터링 결과 평가 모듈
클러스터 크기, inertia, sklearn 품질 지표 계산
"""

import logging
from typing import Any, Dict, Optional, Sequence

import numpy as np
import pandas as pd
from sklearn.metrics import silhouette_score, davies_bouldin_score, calinski_harabasz_score

logger = logging.getLogger(__name__)


def evaluate_clustering(
    points: Sequence[Sequence[float]],
    labels: Sequence[int],
    centers: Optional[Sequence[Sequence[float]]] = None,
) -> Dict[str, Any]:
    """
    클러스터링 품질 평가

    Parameters:
    -----------
    points : sequence of (x, y)
        입력 포인트
    labels : sequence of int
        포인트별 클러스터 레이블
    centers : sequence of (x, y), optional
        클러스터 중심 (있으면 inertia 계산)

    Returns:
    --------
    dict : 평가 결과
        - cluster_sizes: 클러스터별 포인트 수
        - n_clusters: 포인트가 할당된 클러스터 수
        - inertia: 중심까지 제곱 거리 합 (centers가 없으면 None)
        - silhouette / davies_bouldin / calinski_harabasz:
          2 <= n_clusters < n_points 일 때만 계산, 아니면 None
    """
    X = np.asarray(points, dtype=np.float64)
    y = np.asarray(labels, dtype=int)
    n_points = len(X)

    cluster_sizes = pd.Series(y).value_counts().sort_index()
    n_clusters = int(len(cluster_sizes))

    inertia = None
    if centers is not None and n_points > 0:
        C = np.asarray(centers, dtype=np.float64)
        inertia = float(((X - C[y]) ** 2).sum())

    result: Dict[str, Any] = {
        'cluster_sizes': {int(k): int(v) for k, v in cluster_sizes.items()},
        'n_clusters': n_clusters,
        'inertia': inertia,
        'silhouette': None,
        'davies_bouldin': None,
        'calinski_harabasz': None,
    }

    if not 2 <= n_clusters < n_points:
        logger.debug(f"[Evaluation] 품질 지표 생략: 클러스터 {n_clusters}개, 포인트 {n_points}개")
        return result

    result['silhouette'] = float(silhouette_score(X, y))
    result['davies_bouldin'] = float(davies_bouldin_score(X, y))
    result['calinski_harabasz'] = float(calinski_harabasz_score(X, y))

    return result
