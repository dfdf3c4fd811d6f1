"""
클러스터링 코어 모듈
K-Means 파이프라인 및 평가 유틸리티
"""

from .pipeline import KMeansClusteringPipeline
from .evaluation import evaluate_clustering

__all__ = [
    'KMeansClusteringPipeline',
    'evaluate_clustering',
]
