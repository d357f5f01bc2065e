"""
Middleware for the de-stress site backend.
Provides CORS, request logging and error handling middleware components.
"""

import time
from typing import Callable
from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from utils import api_logger, DestressApiError, ErrorCodes, create_error_response

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type",
    "Access-Control-Allow-Methods": "GET,POST,OPTIONS",
}


class AllowAllCORSMiddleware(BaseHTTPMiddleware):
    """全放行的CORS中间件，OPTIONS预检直接返回204"""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if request.method == "OPTIONS":
            return Response(status_code=204, headers=CORS_HEADERS)

        response = await call_next(request)
        response.headers.update(CORS_HEADERS)
        return response


class LoggingMiddleware(BaseHTTPMiddleware):
    """日志中间件"""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.time()

        try:
            response = await call_next(request)

            process_time = time.time() - start_time
            api_logger.info(f"[API] {request.method} {request.url.path} - {response.status_code} - {process_time:.3f}s")

            response.headers["X-Process-Time"] = f"{process_time:.6f}"
            return response

        except Exception as e:
            process_time = time.time() - start_time
            api_logger.error(f"[API] {request.method} {request.url.path} - ERROR - {process_time:.3f}s - {str(e)}")
            raise


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """错误处理中间件"""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            return await call_next(request)

        except DestressApiError as e:
            api_logger.error(f"[API] Service error: {e}", exc_info=True)
            return JSONResponse(status_code=500, content=create_error_response(e))

        except Exception as e:
            api_logger.error(f"[API] Unexpected error: {str(e)}", exc_info=True)
            return JSONResponse(
                status_code=500,
                content=create_error_response(DestressApiError(
                    "An unexpected error occurred",
                    ErrorCodes.INTERNAL_ERROR
                ))
            )


def setup_middleware(app):
    """设置所有中间件"""
    # 后添加的中间件在外层，CORS 必须最外层
    app.add_middleware(ErrorHandlingMiddleware)
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(AllowAllCORSMiddleware)

    api_logger.info("[API] Middleware setup completed")
