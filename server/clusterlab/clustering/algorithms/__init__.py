"""클러스터링 알고리즘 모듈"""
from .base import BaseClusteringAlgorithm
from .kmeans import (
    DEFAULT_LEARNING_RATE,
    ClusterResult,
    GradientKMeansAlgorithm,
    as_points,
    assign_labels,
    kmeans,
)

__all__ = [
    'BaseClusteringAlgorithm',
    'GradientKMeansAlgorithm',
    'ClusterResult',
    'DEFAULT_LEARNING_RATE',
    'as_points',
    'assign_labels',
    'kmeans',
]
