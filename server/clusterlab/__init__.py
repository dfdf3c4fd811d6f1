"""Cluster Lab - 캔버스 포인트 K-Means 클러스터링 서버"""

__version__ = "0.1.0"
