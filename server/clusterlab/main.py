"""
Cluster Lab API - Main Application Entry Point
라우터 등록 및 핵심 설정
"""
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from pathlib import Path
from dotenv import load_dotenv
import os
import logging
import time
import traceback

# 환경 변수 로드 - LOG_LEVEL 및 설정 모듈보다 먼저 수행
ENV_PATH = (Path(__file__).resolve().parents[1] / ".env")
load_dotenv(ENV_PATH, override=False)

# 로깅 설정 (기본 INFO, 환경 변수로 제어)
log_level = os.getenv("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, log_level, logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)

from clusterlab import __version__
from clusterlab.clustering.errors import InvalidArgumentError
from clusterlab.core.config import CORS_ORIGINS, get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    앱 수명주기 관리 (startup/shutdown)
    """
    settings = get_settings()
    logger.info(
        f"[BOOT] Cluster Lab API {__version__} 시작: "
        f"k={settings.min_clusters}~{settings.max_clusters}, "
        f"learning_rate={settings.learning_rate}, 캔버스={settings.canvas_width}x{settings.canvas_height}"
    )
    yield
    logger.info("[BOOT] Cluster Lab API 종료")


app = FastAPI(title="Cluster Lab API", version=__version__, lifespan=lifespan)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """모든 요청을 로깅하는 미들웨어"""
    start_time = time.time()

    try:
        response = await call_next(request)
        process_time = time.time() - start_time
        # 에러 응답만 로깅
        if response.status_code >= 400:
            logger.warning(f"[REQUEST] {request.method} {request.url.path} - 응답: {response.status_code} ({process_time:.2f}초)")
        return response
    except Exception as e:
        process_time = time.time() - start_time
        logger.error(f"[REQUEST] {request.method} {request.url.path} - 에러 발생 ({process_time:.2f}초): {e}", exc_info=True)
        raise


@app.exception_handler(InvalidArgumentError)
async def invalid_argument_handler(request: Request, exc: InvalidArgumentError):
    """잘못된 입력 -> 400"""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "invalid_argument", "detail": str(exc)}
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """전역 예외 핸들러 - 모든 예외를 잡아서 상세 정보 반환"""
    error_detail = traceback.format_exc()
    logger.error(f"전역 예외 발생: {exc}\n{error_detail}", exc_info=True)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": str(exc),
            "detail": error_detail,
            "path": str(request.url),
            "method": request.method
        }
    )


app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
    max_age=3600,  # preflight 요청 캐시 시간
)

# API 라우터 등록
from clusterlab.api.health import router as health_router
from clusterlab.api.clustering import router as clustering_router
app.include_router(health_router)
app.include_router(clustering_router)


# 기본 라우트
@app.get("/")
def root():
    return {"name": "Cluster Lab API", "version": __version__}
