"""
FastAPI application for the de-stress site backend.
Main application entry point for the API server.
"""

from datetime import datetime

from fastapi import FastAPI

from utils import __version__
from .models import HealthResponse
from .routes import router
from .middleware import setup_middleware


def create_app() -> FastAPI:
    """创建并装配FastAPI应用"""
    application = FastAPI(
        title="Destress API",
        description="Rotating quotes and analytics tracking for the de-stress site",
        version=__version__,
    )

    # 设置中间件
    setup_middleware(application)

    # 添加路由
    application.include_router(router, prefix="/api")

    @application.get("/health", response_model=HealthResponse)
    async def health_check():
        """健康检查端点"""
        return HealthResponse(
            status="healthy",
            timestamp=datetime.now().isoformat(),
            version=__version__
        )

    return application


app = create_app()
