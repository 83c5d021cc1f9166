#!/usr/bin/env python3
"""
Mock LUIS Service

In-memory implementation of the LUIS Programmatic API v2.0 authoring routes used
by LuisProgClient. It answers with the same status codes and body shapes as the
real service, including 400 for unknown ids and the gateway's 401 body for a
bad subscription key.

Usage:
    luis-mock-service --port 8080 --subscription-key mock-key

    # or in-process
    service = MockLuisService(subscription_key="mock-key")
    transport = httpx.ASGITransport(app=service.app)
    client = LuisProgClient("mock-key", "westus", transport=transport)
"""
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

import uvicorn
import yaml
from fastapi import APIRouter, Body, FastAPI, Request
from fastapi.responses import JSONResponse

from .common.logger import configure_logging, get_logger
from .core.constants import ApiConstants

logger = get_logger(__name__)

INTENT_TYPE = {"typeId": 0, "readableType": "Intent Classifier"}
ENTITY_TYPE = {"typeId": 1, "readableType": "Entity Extractor"}
NONE_INTENT = "None"
DEFAULT_VERSION = "0.1"


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _bad_argument(message: str) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={"error": {"code": "BadArgument", "message": message}}
    )


def _operation_succeeded() -> JSONResponse:
    return JSONResponse(content={"code": "Success", "message": "Operation Succeeded"})


class MockLuisService:
    """Mock LUIS Service implementation"""

    def __init__(
        self,
        subscription_key: str = "mock-key",
        region: str = "westus",
        data_file: Optional[str] = None
    ):
        """
        Initialize Mock LUIS Service

        Args:
            subscription_key: Key every request must carry
            region: Region the mock pretends to serve; publish requests must match it
            data_file: Optional YAML file with seed applications
        """
        self.subscription_key = subscription_key
        self.region = region.lower()
        self.apps: Dict[str, Dict[str, Any]] = {}
        self.versions: Dict[str, Dict[str, Dict[str, Any]]] = {}
        self._next_example_id = -1

        if data_file:
            self.load_seed_data(Path(data_file))

        self.app = FastAPI(
            title="Mock LUIS Service",
            description="Mock implementation of the LUIS Programmatic API for testing",
            version="0.1.0"
        )
        self.setup_routes()

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    def load_seed_data(self, data_file: Path) -> None:
        """Load seed applications from a YAML file"""
        with open(data_file, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}

        for app in data.get("apps", []):
            versions = app.pop("versions", None) or {DEFAULT_VERSION: {}}
            app_id = str(app.get("id") or uuid.uuid4())
            self._store_app(app_id, app, list(versions))
            for version_id, content in versions.items():
                version = self.versions[app_id][str(version_id)]
                for intent in (content or {}).get("intents", []):
                    self._add_model(version["intents"], intent["name"], INTENT_TYPE, intent.get("id"))
                for entity in (content or {}).get("entities", []):
                    self._add_model(version["entities"], entity["name"], ENTITY_TYPE, entity.get("id"))

        logger.info(f"Loaded {len(self.apps)} seed applications from {data_file}")

    def _store_app(self, app_id: str, fields: Dict[str, Any], version_ids: List[str]) -> None:
        self.apps[app_id] = {
            "id": app_id,
            "name": fields.get("name"),
            "description": fields.get("description"),
            "culture": fields.get("culture", "en-us"),
            "usageScenario": fields.get("usageScenario", ""),
            "domain": fields.get("domain", ""),
            "versionsCount": len(version_ids),
            "createdDateTime": _now(),
            "endpoints": {},
            "endpointHitsCount": 0,
            "activeVersion": str(version_ids[0]),
        }
        self.versions[app_id] = {}
        for version_id in version_ids:
            version = {"intents": {}, "entities": {}, "examples": [], "trained": None}
            self._add_model(version["intents"], NONE_INTENT, INTENT_TYPE)
            self.versions[app_id][str(version_id)] = version

    @staticmethod
    def _add_model(
        models: Dict[str, Dict[str, Any]],
        name: str,
        model_type: Dict[str, Any],
        model_id: Optional[str] = None
    ) -> str:
        model_id = str(model_id or uuid.uuid4())
        models[model_id] = {"id": model_id, "name": name, **model_type}
        return model_id

    def _version(self, app_id: str, version_id: str) -> Optional[Dict[str, Any]]:
        return self.versions.get(app_id, {}).get(version_id)

    # ------------------------------------------------------------------
    # Routes
    # ------------------------------------------------------------------

    def setup_routes(self) -> None:
        """Setup FastAPI routes"""

        @self.app.middleware("http")
        async def check_subscription_key(request: Request, call_next):
            key = request.headers.get(ApiConstants.SUBSCRIPTION_KEY_HEADER)
            if request.url.path.startswith(ApiConstants.API_PATH) and key != self.subscription_key:
                return JSONResponse(
                    status_code=401,
                    content={
                        "statusCode": 401,
                        "message": "Access denied due to invalid subscription key. "
                                   "Make sure to provide a valid key for an active subscription."
                    }
                )
            return await call_next(request)

        @self.app.get("/health")
        async def health_check():
            """Health check endpoint"""
            return {
                "status": "healthy",
                "timestamp": _now(),
                "service": "mock-luis-service"
            }

        router = APIRouter(prefix=ApiConstants.API_PATH)
        self._setup_app_routes(router)
        self._setup_model_routes(router, "intents", INTENT_TYPE)
        self._setup_model_routes(router, "entities", ENTITY_TYPE)
        self._setup_version_routes(router)
        self.app.include_router(router)

    def _setup_app_routes(self, router: APIRouter) -> None:

        @router.get("/apps")
        async def list_apps():
            return JSONResponse(content=list(self.apps.values()))

        @router.post("/apps")
        async def add_app(body: Dict[str, Any] = Body(...)):
            if not body.get("name") or not body.get("culture"):
                return _bad_argument("The application name and culture are required.")
            if any(app["name"] == body["name"] for app in self.apps.values()):
                return _bad_argument(f"An application with the same name '{body['name']}' already exists.")

            app_id = str(uuid.uuid4())
            version_id = body.get("initialVersionId") or DEFAULT_VERSION
            self._store_app(app_id, body, [version_id])
            logger.info(f"Mock created application {app_id}")
            return JSONResponse(status_code=201, content=app_id)

        @router.get("/apps/{app_id}")
        async def get_app(app_id: str):
            if app_id not in self.apps:
                return _bad_argument(f"Cannot find an application with the ID {app_id}.")
            return JSONResponse(content=self.apps[app_id])

        @router.put("/apps/{app_id}")
        async def rename_app(app_id: str, body: Dict[str, Any] = Body(...)):
            if app_id not in self.apps:
                return _bad_argument(f"Cannot find an application with the ID {app_id}.")
            if not body.get("name"):
                return _bad_argument("The application name is required.")
            self.apps[app_id]["name"] = body["name"]
            if "description" in body:
                self.apps[app_id]["description"] = body["description"]
            return _operation_succeeded()

        @router.delete("/apps/{app_id}")
        async def delete_app(app_id: str):
            if app_id not in self.apps:
                return _bad_argument(f"Cannot find an application with the ID {app_id}.")
            del self.apps[app_id]
            del self.versions[app_id]
            return _operation_succeeded()

        @router.post("/apps/{app_id}/publish")
        async def publish(app_id: str, body: Dict[str, Any] = Body(...)):
            if app_id not in self.apps:
                return _bad_argument(f"Cannot find an application with the ID {app_id}.")
            version_id = str(body.get("versionId", ""))
            if self._version(app_id, version_id) is None:
                return _bad_argument(f"Cannot find version {version_id}.")
            region = str(body.get("region", "")).lower()
            if region != self.region:
                return _bad_argument(f"Cannot publish to region '{region}'; the application lives in '{self.region}'.")

            is_staging = str(body.get("isStaging", False)).lower() == "true"
            slot = "staging" if is_staging else "production"
            self.apps[app_id]["endpoints"][slot] = {"versionId": version_id}
            return JSONResponse(
                status_code=201,
                content={
                    "versionId": version_id,
                    "isStaging": is_staging,
                    "endpointUrl": f"https://{region}.api.cognitive.microsoft.com/luis/v2.0/apps/{app_id}",
                    "region": region,
                    "assignedEndpointKey": "",
                    "endpointRegion": region,
                    "publishedDateTime": _now(),
                }
            )

    def _setup_model_routes(self, router: APIRouter, collection: str, model_type: Dict[str, Any]) -> None:
        """Intents and entities share the same list/get/add/rename/delete routes"""
        base = "/apps/{app_id}/versions/{version_id}/" + collection
        label = "intent" if collection == "intents" else "entity"

        def models_or_error(app_id: str, version_id: str):
            if app_id not in self.apps:
                return None, _bad_argument(f"Cannot find an application with the ID {app_id}.")
            version = self._version(app_id, version_id)
            if version is None:
                return None, _bad_argument(f"Cannot find version {version_id}.")
            return version[collection], None

        async def list_models(app_id: str, version_id: str):
            models, error = models_or_error(app_id, version_id)
            if error:
                return error
            return JSONResponse(content=list(models.values()))

        async def add_model(app_id: str, version_id: str, body: Dict[str, Any] = Body(...)):
            models, error = models_or_error(app_id, version_id)
            if error:
                return error
            name = body.get("name")
            if not name:
                return _bad_argument(f"The {label} name is required.")
            if any(model["name"] == name for model in models.values()):
                return _bad_argument(f"An {label} with the same name '{name}' already exists.")
            model_id = self._add_model(models, name, model_type)
            return JSONResponse(status_code=201, content=model_id)

        async def get_model(app_id: str, version_id: str, model_id: str):
            models, error = models_or_error(app_id, version_id)
            if error:
                return error
            if model_id not in models:
                return _bad_argument(f"Cannot find the {label} with the ID {model_id}.")
            return JSONResponse(content=models[model_id])

        async def rename_model(app_id: str, version_id: str, model_id: str, body: Dict[str, Any] = Body(...)):
            models, error = models_or_error(app_id, version_id)
            if error:
                return error
            if model_id not in models:
                return _bad_argument(f"Cannot find the {label} with the ID {model_id}.")
            if not body.get("name"):
                return _bad_argument(f"The {label} name is required.")
            models[model_id]["name"] = body["name"]
            return _operation_succeeded()

        async def delete_model(app_id: str, version_id: str, model_id: str):
            models, error = models_or_error(app_id, version_id)
            if error:
                return error
            if model_id not in models:
                return _bad_argument(f"Cannot find the {label} with the ID {model_id}.")
            del models[model_id]
            return _operation_succeeded()

        router.add_api_route(base, list_models, methods=["GET"], name=f"list_{collection}")
        router.add_api_route(base, add_model, methods=["POST"], name=f"add_{label}")
        router.add_api_route(base + "/{model_id}", get_model, methods=["GET"], name=f"get_{label}")
        router.add_api_route(base + "/{model_id}", rename_model, methods=["PUT"], name=f"rename_{label}")
        router.add_api_route(base + "/{model_id}", delete_model, methods=["DELETE"], name=f"delete_{label}")

    def _setup_version_routes(self, router: APIRouter) -> None:

        @router.post("/apps/{app_id}/versions/{version_id}/example")
        async def add_example(app_id: str, version_id: str, body: Dict[str, Any] = Body(...)):
            version = self._version(app_id, version_id)
            if version is None:
                return _bad_argument(f"Cannot find version {version_id} of application {app_id}.")
            text = body.get("text")
            intent_name = body.get("intentName")
            if not text:
                return _bad_argument("The example text is required.")
            if not any(intent["name"] == intent_name for intent in version["intents"].values()):
                return _bad_argument(f"The intent classifier {intent_name} does not exist.")

            entity_names = {entity["name"] for entity in version["entities"].values()}
            for label in body.get("entityLabels") or []:
                if label.get("entityName") not in entity_names:
                    return _bad_argument(f"The entity extractor {label.get('entityName')} does not exist.")
                if label.get("endCharIndex", 0) >= len(text):
                    return _bad_argument("The entity label is outside the example text.")

            example_id = self._next_example_id
            self._next_example_id -= 1
            version["examples"].append({"id": example_id, **body})
            # the real service answers this call in PascalCase
            return JSONResponse(
                status_code=201,
                content={"UtteranceText": text, "ExampleId": example_id}
            )

        @router.post("/apps/{app_id}/versions/{version_id}/train")
        async def train(app_id: str, version_id: str):
            version = self._version(app_id, version_id)
            if version is None:
                return _bad_argument(f"Cannot find version {version_id} of application {app_id}.")
            version["trained"] = _now()
            return JSONResponse(status_code=202, content={"statusId": 9, "status": "Queued"})

        @router.get("/apps/{app_id}/versions/{version_id}/train")
        async def training_status(app_id: str, version_id: str):
            version = self._version(app_id, version_id)
            if version is None:
                return _bad_argument(f"Cannot find version {version_id} of application {app_id}.")

            statuses = []
            for model in list(version["intents"].values()) + list(version["entities"].values()):
                if version["trained"]:
                    details = {
                        "statusId": 0,
                        "status": "Success",
                        "exampleCount": len(version["examples"]),
                        "trainingDateTime": version["trained"],
                    }
                else:
                    details = {"statusId": 9, "status": "Queued"}
                statuses.append({"modelId": model["id"], "details": details})
            return JSONResponse(content=statuses)


def main():
    """Main entry point"""
    import argparse

    parser = argparse.ArgumentParser(description="Mock LUIS Service")
    parser.add_argument("--host", default="0.0.0.0", help="Host to bind to")
    parser.add_argument("--port", type=int, default=8080, help="Port to bind to")
    parser.add_argument("--subscription-key", default="mock-key",
                        help="Subscription key clients must send")
    parser.add_argument("--region", default="westus", help="Region the mock serves")
    parser.add_argument("--data-file", default=None, help="Optional YAML seed data file")

    args = parser.parse_args()

    configure_logging(log_level="INFO")
    mock_service = MockLuisService(
        subscription_key=args.subscription_key,
        region=args.region,
        data_file=args.data_file
    )

    logger.info(f"Starting Mock LUIS Service on {args.host}:{args.port}")
    logger.info(f"API root: http://{args.host}:{args.port}{ApiConstants.API_PATH}")

    uvicorn.run(mock_service.app, host=args.host, port=args.port)


if __name__ == "__main__":
    main()
