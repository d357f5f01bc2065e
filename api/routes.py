"""
API routes for the de-stress site backend.
Defines the quote and analytics tracking endpoints.
"""

import json

from fastapi import APIRouter, Request, Response
from fastapi.responses import JSONResponse

from utils import api_logger, track_logger
from .models import QuoteResponse, TrackEvent
from .quotes import select_quote

router = APIRouter()

_decoder = json.JSONDecoder()


# Quote
async def get_quote(request: Request):
    """获取当前语录（接受任意请求方法）"""
    quote = select_quote()
    api_logger.debug(f"[API] Serving quote: {quote}")
    return JSONResponse(QuoteResponse(quote=quote).model_dump())


# 不限定 methods，任意方法都命中；OPTIONS 由 CORS 中间件在路由之前处理
router.add_route("/quote", get_quote, include_in_schema=False)


def parse_track_event(body: bytes) -> TrackEvent:
    """尽力解析埋点事件，只读取第一个JSON值，解析失败时返回零值记录"""
    try:
        data, _ = _decoder.raw_decode(body.decode("utf-8").lstrip())
        return TrackEvent.model_validate(data)
    except (ValueError, RecursionError):
        # ValueError 包括 JSONDecodeError、UnicodeDecodeError 和 pydantic ValidationError
        return TrackEvent()


# Track
@router.post("/track", status_code=204, response_class=Response, tags=["Track"])
async def track_event(request: Request):
    """记录前端埋点事件"""
    event = parse_track_event(await request.body())
    track_logger.info(f"[track] event={event.event} scene={event.scene} ts={event.ts}")
    return Response(status_code=204)


async def track_method_not_allowed(request: Request):
    """非POST请求返回空body的405"""
    return Response(status_code=405)


# 必须在 POST 路由之后注册，兜底其余所有方法
router.add_route("/track", track_method_not_allowed, include_in_schema=False)
