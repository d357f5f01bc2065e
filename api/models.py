"""
API data models for the de-stress site backend.
Pydantic models for request/response shapes.
"""

from pydantic import BaseModel, ConfigDict, Field


class QuoteResponse(BaseModel):
    """语录响应模型"""
    quote: str = Field(..., description="当前语录")


class TrackEvent(BaseModel):
    """前端埋点事件

    字段缺失时取零值，未知字段忽略。
    """
    model_config = ConfigDict(extra="ignore")

    event: str = Field("", description="事件名称")
    scene: str = Field("", description="场景名称")
    ts: int = Field(0, description="客户端时间戳")


class HealthResponse(BaseModel):
    """健康检查响应模型"""
    status: str = Field(..., description="服务状态")
    timestamp: str = Field(..., description="检查时间")
    version: str = Field(..., description="服务版本")
