"""클러스터링 모듈"""
from .core import KMeansClusteringPipeline, evaluate_clustering
from .algorithms import (
    BaseClusteringAlgorithm,
    ClusterResult,
    GradientKMeansAlgorithm,
    assign_labels,
    kmeans,
)
from .errors import ClusteringError, InvalidArgumentError, NotFittedError
from .palette import PALETTE, color_for, colors_for
from .point_store import PointStore, clamp

__all__ = [
    # Core
    'KMeansClusteringPipeline',
    'evaluate_clustering',
    # Algorithms
    'BaseClusteringAlgorithm',
    'GradientKMeansAlgorithm',
    'ClusterResult',
    'assign_labels',
    'kmeans',
    # Errors
    'ClusteringError',
    'InvalidArgumentError',
    'NotFittedError',
    # Utils
    'PALETTE',
    'color_for',
    'colors_for',
    'PointStore',
    'clamp',
]
