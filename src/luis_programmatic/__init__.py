"""
LUIS Programmatic Client

Async client for the LUIS Programmatic (authoring) API v2.0: applications,
intents, entities, labeled examples, training and publishing.

Usage:
    from luis_programmatic import LuisProgClient, Location

    async with LuisProgClient("<subscription-key>", Location.WEST_US) as client:
        app_id = await client.add_app("Demo", "desc", "en-us", "IoT", "", None)
        intent_id = await client.add_intent("TurnOn", app_id, "0.1")
        await client.train(app_id, "0.1")
"""

from .core import (
    ILuisProgClient,
    LuisProgClient,
    ServiceClient,
    Location,
    LuisError,
    RemoteServiceError,
    MalformedResponseError,
    NetworkError,
    LuisApp,
    Intent,
    Entity,
    Utterance,
    TrainingDetails,
    TrainingStatusDetails,
    Training,
    Publish,
    Example,
    EntityLabel,
)
from .common import (
    LuisClientConfig,
    configure_logging,
    get_config,
    get_logger,
    load_config,
    load_config_from_dict,
    load_config_from_env,
)
from .factory import LuisClientFactory, create_luis_client

__version__ = "0.1.0"

__all__ = [
    # Clients
    "ILuisProgClient",
    "LuisProgClient",
    "ServiceClient",
    "Location",
    # Errors
    "LuisError",
    "RemoteServiceError",
    "MalformedResponseError",
    "NetworkError",
    # Models
    "LuisApp",
    "Intent",
    "Entity",
    "Utterance",
    "TrainingDetails",
    "TrainingStatusDetails",
    "Training",
    "Publish",
    "Example",
    "EntityLabel",
    # Configuration and logging
    "LuisClientConfig",
    "configure_logging",
    "get_config",
    "get_logger",
    "load_config",
    "load_config_from_dict",
    "load_config_from_env",
    # Factory
    "LuisClientFactory",
    "create_luis_client",
    # Metadata
    "__version__",
]
