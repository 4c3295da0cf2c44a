# inventory/main.py
import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from inventory.core.config import settings
from inventory.core.logging_config import setup_logging
from inventory.core.database import Base, engine
from inventory.routers.category_router import router as category_router

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    setup_logging(settings.LOG_LEVEL, settings.LOG_FILE)

    app = FastAPI(title="Inventory Category API", debug=settings.DEBUG)

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # --------------------------------
    # 라우터 등록
    # --------------------------------
    app.include_router(category_router)

    # --------------------------------
    # 서버 이벤트
    # --------------------------------
    @app.on_event("startup")
    def on_startup():
        Base.metadata.create_all(bind=engine)
        logger.info("DB 테이블 자동 생성 완료")

    @app.on_event("shutdown")
    def on_shutdown():
        engine.dispose()
        logger.info("서버 종료, DB 연결 정리 완료")

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host=settings.SERVER_HOST, port=settings.SERVER_PORT)
