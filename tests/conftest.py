"""
全局测试配置
"""
import os
import sys
from unittest.mock import MagicMock

import httpx
import pytest

# 确保能导入项目模块
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src")))

from luis_programmatic.core.client import LuisProgClient
from luis_programmatic.mock_service import MockLuisService

TEST_KEY = "test-subscription-key"
TEST_REGION = "westus"


@pytest.fixture
def make_response():
    """构造模拟 httpx 响应的工厂"""
    def _make(status_code: int, text: str = "") -> MagicMock:
        response = MagicMock()
        response.status_code = status_code
        response.text = text
        return response
    return _make


@pytest.fixture
def luis_client():
    """直接构造的客户端，测试中通过 patch.object 替换底层 HTTP 方法"""
    return LuisProgClient(subscription_key=TEST_KEY, location=TEST_REGION)


@pytest.fixture
def mock_service():
    """内存中的模拟 LUIS 服务"""
    return MockLuisService(subscription_key=TEST_KEY, region=TEST_REGION)


@pytest.fixture
def service_client(mock_service):
    """通过 ASGITransport 连接到模拟服务的客户端"""
    transport = httpx.ASGITransport(app=mock_service.app)
    return LuisProgClient(subscription_key=TEST_KEY, location=TEST_REGION, transport=transport)
