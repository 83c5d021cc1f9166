"""
LUIS 客户端的自定义异常定义。
"""
from typing import Optional


class LuisError(Exception):
    """LUIS 客户端的基础异常类"""
    pass


class RemoteServiceError(LuisError):
    """服务端以结构化错误体拒绝了请求"""

    def __init__(self, code: str, message: str, status_code: Optional[int] = None):
        super().__init__(f"{code} - {message}")
        self.code = code
        self.message = message
        self.status_code = status_code


class MalformedResponseError(LuisError):
    """响应体无法解码为期望的结构（包括错误体本身无法解码）"""

    def __init__(self, message: str, status_code: Optional[int] = None, body: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class NetworkError(LuisError):
    """传输层失败（DNS、TLS、超时等），原始异常通过 __cause__ 保留"""
    pass
