"""
캔버스 포인트 저장소
같은 좌표에 여러 번 찍힌 포인트를 x -> {y} 맵으로 중복 제거
"""

from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from .errors import InvalidArgumentError


def clamp(value: float, lo: float, hi: float) -> float:
    """value를 [lo, hi] 범위로 제한"""
    if value <= lo:
        return lo
    if value >= hi:
        return hi
    return value


class PointStore:
    """중복 제거 포인트 저장소 (삽입 순서 유지)"""

    def __init__(self, bounds: Optional[Tuple[float, float]] = None):
        """
        Parameters:
        -----------
        bounds : (width, height), optional
            지정하면 포인트를 캔버스 영역 [0, width] x [0, height]로 제한
        """
        self.bounds = bounds
        # dict/set 대신 dict/dict 사용: y의 삽입 순서 유지
        self._points: Dict[float, Dict[float, None]] = {}

    def add(self, x: float, y: float) -> None:
        if self.bounds is not None:
            width, height = self.bounds
            x = clamp(x, 0, width)
            y = clamp(y, 0, height)
        self._points.setdefault(x, {})[y] = None

    def extend(self, points: Iterable[Sequence[float]]) -> None:
        for p in points:
            if len(p) != 2:
                raise InvalidArgumentError(f"포인트는 (x, y) 쌍이어야 합니다: {p!r}")
            self.add(float(p[0]), float(p[1]))

    def to_list(self) -> List[List[float]]:
        """[[x, y], ...] 형태로 평탄화"""
        return [[x, y] for x, ys in self._points.items() for y in ys]

    def clear(self) -> None:
        self._points.clear()

    def __len__(self) -> int:
        return sum(len(ys) for ys in self._points.values())
