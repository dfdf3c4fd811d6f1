"""K-Means 클러스터링 API 엔드포인트"""
import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, HTTPException
from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel

from clusterlab.core.config import get_settings
from clusterlab.clustering import (
    InvalidArgumentError,
    KMeansClusteringPipeline,
    PALETTE,
    assign_labels,
    colors_for,
)
from clusterlab.clustering.palette import CENTER_STROKE

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/clustering", tags=["clustering"])


class KMeansRequest(BaseModel):
    # 좌표 개수 검사는 as_points에서 수행 (400)
    points: List[List[float]]
    num_clusters: int
    iterations: Optional[int] = None
    seed: Optional[int] = None
    dedupe: bool = True


class AssignRequest(BaseModel):
    points: List[List[float]]
    centers: List[List[float]]


def _build_pipeline() -> KMeansClusteringPipeline:
    settings = get_settings()
    return KMeansClusteringPipeline(
        learning_rate=settings.learning_rate,
        min_clusters=settings.min_clusters,
        max_clusters=settings.max_clusters,
        max_iterations=settings.max_iterations,
        bounds=settings.canvas_bounds,
        verbose=True,
    )


@router.get("/config")
async def get_clustering_config():
    """프론트엔드 슬라이더/캔버스 설정"""
    settings = get_settings()
    return {
        "min_clusters": settings.min_clusters,
        "max_clusters": settings.max_clusters,
        "default_iterations": settings.default_iterations,
        "max_iterations": settings.max_iterations,
        "learning_rate": settings.learning_rate,
        "canvas": {"width": settings.canvas_width, "height": settings.canvas_height},
        "palette": PALETTE,
        "center_stroke": CENTER_STROKE,
    }


@router.post("/kmeans")
async def run_kmeans(request: KMeansRequest) -> Dict[str, Any]:
    """
    캔버스 포인트 K-Means 클러스터링

    Returns:
        centers, labels, point_colors, center_colors, metrics 등
    """
    settings = get_settings()
    iterations = request.iterations if request.iterations is not None else settings.default_iterations
    logger.info(
        f"[KMeans API] 요청: 포인트 {len(request.points)}개, "
        f"k={request.num_clusters}, 반복={iterations}, seed={request.seed}"
    )

    pipeline = _build_pipeline()
    try:
        # CPU 연산이므로 이벤트 루프 밖에서 실행
        return await run_in_threadpool(
            pipeline.run,
            request.points,
            request.num_clusters,
            iterations,
            request.seed,
            request.dedupe,
        )
    except InvalidArgumentError as e:
        logger.warning(f"[KMeans API] 잘못된 요청: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"[KMeans API 오류] {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"클러스터링 실패: {str(e)}")


@router.post("/assign")
async def assign_points(request: AssignRequest) -> Dict[str, Any]:
    """주어진 중심 기준으로 포인트 레이블 계산"""
    try:
        labels = [int(l) for l in assign_labels(request.points, request.centers)]
    except InvalidArgumentError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return {
        "labels": labels,
        "point_colors": colors_for(labels),
    }
