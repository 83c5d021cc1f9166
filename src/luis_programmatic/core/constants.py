"""
LUIS Programmatic API 的常量定义。
"""
from enum import Enum


class Location(str, Enum):
    """LUIS 部署区域，取值即主机名中的区域前缀"""
    WEST_US = "westus"
    WEST_US_2 = "westus2"
    WEST_CENTRAL_US = "westcentralus"
    EAST_US = "eastus"
    EAST_US_2 = "eastus2"
    SOUTH_CENTRAL_US = "southcentralus"
    CANADA_CENTRAL = "canadacentral"
    BRAZIL_SOUTH = "brazilsouth"
    WEST_EUROPE = "westeurope"
    NORTH_EUROPE = "northeurope"
    UK_SOUTH = "uksouth"
    FRANCE_CENTRAL = "francecentral"
    SOUTHEAST_ASIA = "southeastasia"
    EAST_ASIA = "eastasia"
    JAPAN_EAST = "japaneast"
    JAPAN_WEST = "japanwest"
    KOREA_CENTRAL = "koreacentral"
    CENTRAL_INDIA = "centralindia"
    AUSTRALIA_EAST = "australiaeast"

    def __str__(self) -> str:
        return self.value


class ApiConstants:
    """HTTP 接口相关常量"""
    SERVICE_HOST = "api.cognitive.microsoft.com"
    API_PATH = "/luis/api/v2.0"
    BASE_URL_TEMPLATE = "https://{region}." + SERVICE_HOST + API_PATH

    SUBSCRIPTION_KEY_HEADER = "Ocp-Apim-Subscription-Key"


class ErrorMessages:
    """错误消息模板"""
    EMPTY_SUBSCRIPTION_KEY = "subscription key must not be empty"
    EMPTY_REGION = "region must not be empty"
    NETWORK_FAILURE = "{method} {path} failed: {error}"
    MALFORMED_ERROR_BODY = "HTTP {status_code} response body is not a service error: {body!r}"
    MALFORMED_SUCCESS_BODY = "HTTP {status_code} response body does not decode as {target}: {error}"
