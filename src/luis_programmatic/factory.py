"""
LUIS Client Factory

Factory for creating configured LuisProgClient instances.
"""
from typing import Optional

import httpx

from .common.config import LuisClientConfig, get_config
from .core.client import LuisProgClient
from .core.constants import ErrorMessages


class LuisClientFactory:
    """Factory for creating LUIS client instances"""

    @staticmethod
    def create_client(
        config: LuisClientConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ) -> LuisProgClient:
        """
        Create a LuisProgClient from configuration

        Args:
            config: LUIS client configuration
            transport: Optional httpx transport, e.g. to target a mock service

        Returns:
            Configured LuisProgClient instance

        Raises:
            ValueError: subscription key or region missing from the configuration
        """
        if not config.subscription_key:
            raise ValueError(
                f"{ErrorMessages.EMPTY_SUBSCRIPTION_KEY}; set LUIS_SUBSCRIPTION_KEY or luis.subscription_key"
            )
        return LuisProgClient(
            subscription_key=config.subscription_key,
            location=config.region,
            timeout=config.timeout,
            transport=transport
        )


def create_luis_client(
    config: Optional[LuisClientConfig] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None
) -> LuisProgClient:
    """
    Create a LuisProgClient, loading configuration when none is given

    Args:
        config: Optional configuration; get_config() is used when omitted
        transport: Optional httpx transport

    Returns:
        Configured LuisProgClient instance
    """
    return LuisClientFactory.create_client(config or get_config(), transport=transport)
