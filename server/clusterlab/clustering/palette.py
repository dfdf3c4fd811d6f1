"""클러스터 색상 팔레트 (index mod 5)"""
from typing import List, Sequence

from .errors import InvalidArgumentError

PALETTE: List[str] = [
    'hsl(0, 100%, 50%)',
    'hsl(100, 100%, 50%)',
    'hsl(175, 100%, 50%)',
    'hsl(245, 100%, 50%)',
    'hsl(320, 100%, 50%)',
]

CENTER_STROKE = 'rgb(0, 0, 0)'


def color_for(index: int) -> str:
    """레이블/중심 인덱스에 해당하는 색상"""
    if index < 0:
        raise InvalidArgumentError(f"인덱스는 0 이상이어야 합니다: {index}")
    return PALETTE[index % len(PALETTE)]


def colors_for(indices: Sequence[int]) -> List[str]:
    return [color_for(int(i)) for i in indices]
