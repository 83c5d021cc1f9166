"""
LUIS Programmatic API data models

Request and response shapes exchanged with the service. Python attributes are
snake_case; on the wire every field is lower camel case.
"""
from typing import Any, Dict, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class LuisModel(BaseModel):
    """Base model with camelCase wire aliases"""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        protected_namespaces=(),
    )

    def to_wire(self) -> Dict[str, Any]:
        """Serialize to the JSON-ready dict sent to the service"""
        return self.model_dump(by_alias=True, exclude_none=True)


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------

class LuisApp(LuisModel):
    """A LUIS application"""
    id: str
    name: str
    description: Optional[str] = None
    culture: Optional[str] = None
    usage_scenario: Optional[str] = None
    domain: Optional[str] = None
    versions_count: Optional[int] = None
    created_date_time: Optional[str] = None
    endpoints: Optional[Dict[str, Any]] = None
    endpoint_hits_count: Optional[int] = None
    active_version: Optional[str] = None


class Intent(LuisModel):
    """An intent classifier inside an application version"""
    id: str
    name: str
    type_id: Optional[int] = None
    readable_type: Optional[str] = None


class Entity(LuisModel):
    """An entity extractor inside an application version"""
    id: str
    name: str
    type_id: Optional[int] = None
    readable_type: Optional[str] = None


class Utterance(LuisModel):
    """Confirmation returned after adding a labeled example"""
    # the service answers this call in PascalCase
    utterance_text: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("utteranceText", "UtteranceText", "utterance_text"),
    )
    example_id: Optional[int] = Field(
        default=None,
        validation_alias=AliasChoices("exampleId", "ExampleId", "example_id"),
    )


class TrainingDetails(LuisModel):
    """Result of a training request"""
    status_id: Optional[int] = None
    status: Optional[str] = None


class TrainingStatusDetails(LuisModel):
    """Training progress of a single model"""
    status_id: Optional[int] = None
    status: Optional[str] = None
    example_count: Optional[int] = None
    training_date_time: Optional[str] = None
    failure_reason: Optional[str] = None


class Training(LuisModel):
    """Per-model training status entry"""
    model_id: str
    details: TrainingStatusDetails = Field(default_factory=TrainingStatusDetails)


class Publish(LuisModel):
    """Outcome of publishing an application version"""
    version_id: Optional[str] = None
    is_staging: Optional[bool] = None
    endpoint_url: Optional[str] = None
    region: Optional[str] = None
    assigned_endpoint_key: Optional[str] = None
    endpoint_region: Optional[str] = None
    published_date_time: Optional[str] = None


class ServiceError(LuisModel):
    """The inner error object of a failed request"""
    code: Optional[str] = None
    message: Optional[str] = None


class ServiceErrorResponse(LuisModel):
    """
    Error body returned by the service.

    API errors arrive as {"error": {"code", "message"}}; the gateway answers
    authentication failures with a flat {"statusCode", "message"}.
    """
    error: Optional[ServiceError] = None
    status_code: Optional[int] = None
    message: Optional[str] = None


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------

class AddAppRequest(LuisModel):
    name: str
    description: Optional[str] = None
    culture: str
    usage_scenario: Optional[str] = None
    domain: Optional[str] = None
    initial_version_id: Optional[str] = None


class RenameAppRequest(LuisModel):
    name: str
    description: Optional[str] = None


class AddIntentRequest(LuisModel):
    name: str


class RenameIntentRequest(LuisModel):
    name: str


class AddEntityRequest(LuisModel):
    name: str


class RenameEntityRequest(LuisModel):
    name: str


class EntityLabel(LuisModel):
    """Character span of an entity inside an example (end index inclusive)"""
    entity_name: str
    start_char_index: int = Field(ge=0)
    end_char_index: int = Field(ge=0)


class Example(LuisModel):
    """A labeled utterance to add to an application version"""
    text: str
    intent_name: str
    entity_labels: List[EntityLabel] = Field(default_factory=list)


class PublishRequest(LuisModel):
    version_id: str
    is_staging: bool = False
    region: str
