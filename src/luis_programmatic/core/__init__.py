"""
LUIS 客户端核心模块。

此模块包含传输层、资源客户端、接口、数据模型、常量与异常。
"""

from .constants import ApiConstants, ErrorMessages, Location
from .exceptions import LuisError, MalformedResponseError, NetworkError, RemoteServiceError
from .interfaces import ILuisProgClient
from .models import (
    AddAppRequest,
    AddEntityRequest,
    AddIntentRequest,
    Entity,
    EntityLabel,
    Example,
    Intent,
    LuisApp,
    Publish,
    PublishRequest,
    RenameAppRequest,
    RenameEntityRequest,
    RenameIntentRequest,
    ServiceError,
    ServiceErrorResponse,
    Training,
    TrainingDetails,
    TrainingStatusDetails,
    Utterance,
)
from .service_client import ServiceClient
from .client import LuisProgClient

__all__ = [
    # 客户端
    "ServiceClient",
    "LuisProgClient",
    "ILuisProgClient",

    # 常量
    "ApiConstants",
    "ErrorMessages",
    "Location",

    # 异常
    "LuisError",
    "RemoteServiceError",
    "MalformedResponseError",
    "NetworkError",

    # 响应模型
    "LuisApp",
    "Intent",
    "Entity",
    "Utterance",
    "TrainingDetails",
    "TrainingStatusDetails",
    "Training",
    "Publish",
    "ServiceError",
    "ServiceErrorResponse",

    # 请求模型
    "AddAppRequest",
    "RenameAppRequest",
    "AddIntentRequest",
    "RenameIntentRequest",
    "AddEntityRequest",
    "RenameEntityRequest",
    "EntityLabel",
    "Example",
    "PublishRequest",
]
