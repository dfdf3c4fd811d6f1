"""K-Means 서버 설정 모듈 - 환경변수로 관리"""
import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Final, Tuple


def _env_int(name: str, default: int) -> int:
    """정수 환경변수 (형식 오류 시 기본값)"""
    value = os.getenv(name)
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    """실수 환경변수 (형식 오류 시 기본값)"""
    value = os.getenv(name)
    if not value:
        return default
    try:
        return float(value)
    except ValueError:
        return default


@dataclass(frozen=True)
class KMeansSettings:
    """K-Means 클러스터링 설정"""
    learning_rate: float = field(default_factory=lambda: _env_float("KMEANS_LEARNING_RATE", 0.01))
    default_iterations: int = field(default_factory=lambda: _env_int("KMEANS_DEFAULT_ITERATIONS", 10))
    max_iterations: int = field(default_factory=lambda: _env_int("KMEANS_MAX_ITERATIONS", 1000))
    min_clusters: int = field(default_factory=lambda: _env_int("KMEANS_MIN_CLUSTERS", 1))
    max_clusters: int = field(default_factory=lambda: _env_int("KMEANS_MAX_CLUSTERS", 10))
    canvas_width: int = field(default_factory=lambda: _env_int("CANVAS_WIDTH", 500))
    canvas_height: int = field(default_factory=lambda: _env_int("CANVAS_HEIGHT", 500))

    @property
    def canvas_bounds(self) -> Tuple[int, int]:
        return (self.canvas_width, self.canvas_height)


@lru_cache(maxsize=1)
def get_settings() -> KMeansSettings:
    """
    설정 로드 (캐싱됨)

    Returns:
        KMeansSettings 인스턴스
    """
    return KMeansSettings()


# CORS 허용 origin (콤마 구분, 기본값: 모두 허용)
CORS_ORIGINS: Final[list[str]] = [
    o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()
]
