"""서버 실행 스크립트"""
import os
from pathlib import Path

if __name__ == "__main__":
    import uvicorn

    # 현재 스크립트가 있는 디렉토리로 이동 (server 디렉토리)
    script_dir = Path(__file__).parent.resolve()
    os.chdir(script_dir)

    uvicorn.run(
        "clusterlab.main:app",
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "8004")),
        reload=False,
        log_level=os.getenv("LOG_LEVEL", "info").lower()
    )
