"""
클러스터링 예외 정의
"""


class ClusteringError(Exception):
    """클러스터링 모듈 최상위 예외"""


class InvalidArgumentError(ClusteringError, ValueError):
    """잘못된 입력 (빈 포인트 집합, num_centers < 1 등)"""


class NotFittedError(ClusteringError):
    """fit() 호출 전에 predict()를 호출한 경우"""
