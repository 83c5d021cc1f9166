"""
LuisProgClient component

Resource-level operations of the LUIS Programmatic API: applications, intents,
entities, examples, training and publishing. Every call is a single request
through ServiceClient; "get by name" lists and matches locally.
"""
from http import HTTPStatus
from typing import Any, Iterable, List, Optional, TypeVar
from urllib.parse import quote

from ..common.logger import get_logger
from .interfaces import ILuisProgClient
from .models import (
    AddAppRequest,
    AddEntityRequest,
    AddIntentRequest,
    Entity,
    Example,
    Intent,
    LuisApp,
    Publish,
    PublishRequest,
    RenameAppRequest,
    RenameEntityRequest,
    RenameIntentRequest,
    Training,
    TrainingDetails,
    Utterance,
)
from .service_client import ServiceClient

logger = get_logger(__name__)

T = TypeVar("T")


def _segment(value: str) -> str:
    return quote(str(value), safe="")


def _find_by_name(items: Optional[Iterable[T]], name: str) -> Optional[T]:
    if not items:
        return None
    return next((item for item in items if item.name == name), None)


class LuisProgClient(ServiceClient, ILuisProgClient):
    """
    LUIS Programmatic API client

    Usage:
        async with LuisProgClient("<key>", Location.WEST_US) as client:
            app_id = await client.add_app("Demo", "desc", "en-us", "IoT", "", None)
    """

    # ------------------------------------------------------------------
    # Paths
    # ------------------------------------------------------------------

    @staticmethod
    def _app_path(app_id: Optional[str] = None) -> str:
        if app_id is None:
            return "/apps"
        return f"/apps/{_segment(app_id)}"

    @classmethod
    def _version_path(cls, app_id: str, app_version_id: str) -> str:
        return f"{cls._app_path(app_id)}/versions/{_segment(app_version_id)}"

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    async def _get_or_none(self, path: str, target: Any) -> Any:
        """GET and decode; HTTP 400 means the resource is absent"""
        status_code, content = await self.get(path)
        if self.is_success(status_code):
            return self.decode(target, content, status_code)
        if status_code == HTTPStatus.BAD_REQUEST:
            logger.debug(f"GET {path} returned 400, treating as not found")
            return None
        self.raise_service_error(status_code, content)

    async def _get_required(self, path: str, target: Any) -> Any:
        """GET and decode; any non-success status raises"""
        status_code, content = await self.get(path)
        if not self.is_success(status_code):
            self.raise_service_error(status_code, content)
        return self.decode(target, content, status_code)

    async def _create(self, path: str, body) -> str:
        content = await self.post(path, body)
        return self.decode(str, content)

    # ------------------------------------------------------------------
    # Applications
    # ------------------------------------------------------------------

    async def get_all_apps(self) -> Optional[List[LuisApp]]:
        return await self._get_or_none(self._app_path(), List[LuisApp])

    async def get_app_by_id(self, app_id: str) -> Optional[LuisApp]:
        return await self._get_or_none(self._app_path(app_id), LuisApp)

    async def get_app_by_name(self, name: str) -> Optional[LuisApp]:
        return _find_by_name(await self.get_all_apps(), name)

    async def add_app(
        self,
        name: str,
        description: Optional[str],
        culture: str,
        usage_scenario: Optional[str],
        domain: Optional[str],
        initial_version_id: Optional[str]
    ) -> str:
        request = AddAppRequest(
            name=name,
            description=description,
            culture=culture,
            usage_scenario=usage_scenario,
            domain=domain,
            initial_version_id=initial_version_id
        )
        app_id = await self._create(self._app_path(), request)
        logger.info(f"Created application '{name}' ({app_id})")
        return app_id

    async def rename_app(self, app_id: str, name: str, description: Optional[str] = None) -> None:
        await self.put(self._app_path(app_id), RenameAppRequest(name=name, description=description))

    async def delete_app(self, app_id: str) -> None:
        await self.delete(self._app_path(app_id))
        logger.info(f"Deleted application {app_id}")

    # ------------------------------------------------------------------
    # Intents
    # ------------------------------------------------------------------

    def _intents_path(self, app_id: str, app_version_id: str, intent_id: Optional[str] = None) -> str:
        path = f"{self._version_path(app_id, app_version_id)}/intents"
        return path if intent_id is None else f"{path}/{_segment(intent_id)}"

    async def get_all_intents(self, app_id: str, app_version_id: str) -> Optional[List[Intent]]:
        return await self._get_or_none(self._intents_path(app_id, app_version_id), List[Intent])

    async def get_intent_by_id(self, intent_id: str, app_id: str, app_version_id: str) -> Optional[Intent]:
        return await self._get_or_none(self._intents_path(app_id, app_version_id, intent_id), Intent)

    async def get_intent_by_name(self, name: str, app_id: str, app_version_id: str) -> Optional[Intent]:
        return _find_by_name(await self.get_all_intents(app_id, app_version_id), name)

    async def add_intent(self, name: str, app_id: str, app_version_id: str) -> str:
        return await self._create(
            self._intents_path(app_id, app_version_id),
            AddIntentRequest(name=name)
        )

    async def rename_intent(self, intent_id: str, name: str, app_id: str, app_version_id: str) -> None:
        await self.put(
            self._intents_path(app_id, app_version_id, intent_id),
            RenameIntentRequest(name=name)
        )

    async def delete_intent(self, intent_id: str, app_id: str, app_version_id: str) -> None:
        await self.delete(self._intents_path(app_id, app_version_id, intent_id))

    # ------------------------------------------------------------------
    # Entities
    # ------------------------------------------------------------------

    def _entities_path(self, app_id: str, app_version_id: str, entity_id: Optional[str] = None) -> str:
        path = f"{self._version_path(app_id, app_version_id)}/entities"
        return path if entity_id is None else f"{path}/{_segment(entity_id)}"

    async def get_all_entities(self, app_id: str, app_version_id: str) -> Optional[List[Entity]]:
        return await self._get_or_none(self._entities_path(app_id, app_version_id), List[Entity])

    async def get_entity_by_id(self, entity_id: str, app_id: str, app_version_id: str) -> Optional[Entity]:
        return await self._get_or_none(self._entities_path(app_id, app_version_id, entity_id), Entity)

    async def get_entity_by_name(self, name: str, app_id: str, app_version_id: str) -> Optional[Entity]:
        return _find_by_name(await self.get_all_entities(app_id, app_version_id), name)

    async def add_entity(self, name: str, app_id: str, app_version_id: str) -> str:
        return await self._create(
            self._entities_path(app_id, app_version_id),
            AddEntityRequest(name=name)
        )

    async def rename_entity(self, entity_id: str, name: str, app_id: str, app_version_id: str) -> None:
        await self.put(
            self._entities_path(app_id, app_version_id, entity_id),
            RenameEntityRequest(name=name)
        )

    async def delete_entity(self, entity_id: str, app_id: str, app_version_id: str) -> None:
        await self.delete(self._entities_path(app_id, app_version_id, entity_id))

    # ------------------------------------------------------------------
    # Examples
    # ------------------------------------------------------------------

    async def add_example(self, app_id: str, app_version_id: str, example: Example) -> Utterance:
        path = f"{self._version_path(app_id, app_version_id)}/example"
        content = await self.post(path, example)
        return self.decode(Utterance, content)

    # ------------------------------------------------------------------
    # Training
    # ------------------------------------------------------------------

    async def train(self, app_id: str, app_version_id: str) -> TrainingDetails:
        path = f"{self._version_path(app_id, app_version_id)}/train"
        content = await self.post(path)
        details = self.decode(TrainingDetails, content)
        logger.info(f"Training requested for {app_id}/{app_version_id}: {details.status}")
        return details

    async def get_training_status_list(self, app_id: str, app_version_id: str) -> List[Training]:
        path = f"{self._version_path(app_id, app_version_id)}/train"
        return await self._get_required(path, List[Training])

    # ------------------------------------------------------------------
    # Publishing
    # ------------------------------------------------------------------

    async def publish(self, app_id: str, app_version_id: str, is_staging: bool, region: str) -> Publish:
        request = PublishRequest(version_id=app_version_id, is_staging=is_staging, region=region)
        content = await self.post(f"{self._app_path(app_id)}/publish", request)
        result = self.decode(Publish, content)
        logger.info(f"Published {app_id}/{app_version_id} to {result.endpoint_url}")
        return result
