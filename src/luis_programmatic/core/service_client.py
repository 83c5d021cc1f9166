"""
ServiceClient component

Transport layer for the LUIS Programmatic API: builds the regional URL, attaches
the subscription key, issues GET/POST/PUT/DELETE and turns failed responses into
exceptions.
"""
from typing import Any, NoReturn, Optional, Tuple, Union

import httpx
from pydantic import TypeAdapter, ValidationError

from ..common.logger import get_logger
from .constants import ApiConstants, ErrorMessages, Location
from .exceptions import MalformedResponseError, NetworkError, RemoteServiceError
from .models import LuisModel, ServiceErrorResponse

logger = get_logger(__name__)


class ServiceClient:
    """
    Service Client component

    Holds the base URL and subscription key for one region and one long-lived
    httpx.AsyncClient. Use as an async context manager or call close().
    """

    def __init__(
        self,
        subscription_key: str,
        location: Union[Location, str],
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Initialize ServiceClient

        Args:
            subscription_key: LUIS authoring key sent with every request
            location: Region the application lives in, e.g. Location.WEST_US or "westus"
            timeout: Request timeout in seconds; httpx defaults apply when None
            transport: Optional httpx transport (e.g. ASGITransport for a mock service)
        """
        if not subscription_key:
            raise ValueError(ErrorMessages.EMPTY_SUBSCRIPTION_KEY)
        region = str(location or "").strip().lower()
        if not region:
            raise ValueError(ErrorMessages.EMPTY_REGION)

        self.subscription_key = subscription_key
        self.region = region
        self.base_url = ApiConstants.BASE_URL_TEMPLATE.format(region=region)
        self.timeout = timeout

        client_kwargs = {}
        if timeout is not None:
            client_kwargs["timeout"] = timeout
        if transport is not None:
            client_kwargs["transport"] = transport
        self.client = httpx.AsyncClient(**client_kwargs)

        logger.debug(f"ServiceClient initialized for {self.base_url}")

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def close(self):
        """Close the HTTP client"""
        await self.client.aclose()

    # ------------------------------------------------------------------
    # HTTP verbs
    # ------------------------------------------------------------------

    async def get(self, path: str) -> Tuple[int, str]:
        """
        Issue a GET request

        Never raises for a non-2xx status; the caller inspects it.

        Returns:
            (status code, body text)
        """
        response = await self._send("GET", path)
        return response.status_code, response.text

    async def post(self, path: str, body: Optional[LuisModel] = None) -> str:
        """
        Issue a POST request, with a JSON body when one is given

        Returns:
            Body text of the successful response

        Raises:
            RemoteServiceError, MalformedResponseError, NetworkError
        """
        response = await self._send("POST", path, body)
        if not self.is_success(response.status_code):
            self.raise_service_error(response.status_code, response.text)
        return response.text

    async def put(self, path: str, body: LuisModel) -> None:
        """Issue a PUT request; any success body is discarded"""
        response = await self._send("PUT", path, body)
        if not self.is_success(response.status_code):
            self.raise_service_error(response.status_code, response.text)

    async def delete(self, path: str) -> None:
        """Issue a DELETE request"""
        response = await self._send("DELETE", path)
        if not self.is_success(response.status_code):
            self.raise_service_error(response.status_code, response.text)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _headers(self) -> dict:
        return {ApiConstants.SUBSCRIPTION_KEY_HEADER: self.subscription_key}

    async def _send(self, method: str, path: str, body: Optional[LuisModel] = None) -> httpx.Response:
        url = f"{self.base_url}{path}"
        headers = self._headers()
        logger.debug(f"{method} {path}")

        try:
            if method == "GET":
                response = await self.client.get(url, headers=headers)
            elif method == "DELETE":
                response = await self.client.delete(url, headers=headers)
            elif method == "POST" and body is None:
                response = await self.client.post(url, headers=headers)
            elif method == "POST":
                response = await self.client.post(url, json=body.to_wire(), headers=headers)
            elif method == "PUT":
                response = await self.client.put(url, json=body.to_wire(), headers=headers)
            else:
                raise ValueError(f"Unsupported HTTP method: {method}")
        except httpx.RequestError as e:
            logger.error(f"Network error on {method} {path}: {e}")
            raise NetworkError(
                ErrorMessages.NETWORK_FAILURE.format(method=method, path=path, error=e)
            ) from e

        logger.debug(f"{method} {path} -> {response.status_code}")
        return response

    @staticmethod
    def is_success(status_code: int) -> bool:
        return 200 <= status_code < 300

    @staticmethod
    def raise_service_error(status_code: int, body: str) -> NoReturn:
        """
        Decode an error body and raise it

        Raises:
            RemoteServiceError: body carries {error:{code,message}} or a gateway {statusCode,message}
            MalformedResponseError: body is neither
        """
        try:
            error_response = ServiceErrorResponse.model_validate_json(body)
        except ValidationError as e:
            logger.error(f"Undecodable error body for HTTP {status_code}")
            raise MalformedResponseError(
                ErrorMessages.MALFORMED_ERROR_BODY.format(status_code=status_code, body=body),
                status_code=status_code,
                body=body
            ) from e

        error = error_response.error
        if error is not None and (error.code or error.message):
            logger.error(f"Service error {error.code}: {error.message}")
            raise RemoteServiceError(
                code=error.code or str(status_code),
                message=error.message or "",
                status_code=status_code
            )

        if error_response.message:
            code = str(error_response.status_code or status_code)
            logger.error(f"Service error {code}: {error_response.message}")
            raise RemoteServiceError(
                code=code,
                message=error_response.message,
                status_code=status_code
            )

        raise MalformedResponseError(
            ErrorMessages.MALFORMED_ERROR_BODY.format(status_code=status_code, body=body),
            status_code=status_code,
            body=body
        )

    @staticmethod
    def decode(target: Any, body: str, status_code: Optional[int] = None) -> Any:
        """
        Decode a success body into the given type

        Raises:
            MalformedResponseError: the body does not match the target type
        """
        try:
            return TypeAdapter(target).validate_json(body)
        except ValidationError as e:
            raise MalformedResponseError(
                ErrorMessages.MALFORMED_SUCCESS_BODY.format(
                    status_code=status_code, target=target, error=e
                ),
                status_code=status_code,
                body=body
            ) from e
