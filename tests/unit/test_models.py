"""
Unit tests for LUIS data models

Tests camelCase wire aliases, optional-field handling and validation.
"""
import pytest
from pydantic import ValidationError

from luis_programmatic.core.models import (
    AddAppRequest,
    EntityLabel,
    Example,
    LuisApp,
    Publish,
    PublishRequest,
    RenameAppRequest,
    ServiceErrorResponse,
    Training,
    Utterance,
)


class TestResponseModels:
    """Test decoding of service responses"""

    def test_luis_app_from_wire(self):
        app = LuisApp.model_validate({
            "id": "abc",
            "name": "Demo",
            "usageScenario": "IoT",
            "createdDateTime": "2017-08-01T10:00:00Z",
            "endpointHitsCount": 3,
            "activeVersion": "0.1",
            "unknownField": "ignored"
        })

        assert app.usage_scenario == "IoT"
        assert app.endpoint_hits_count == 3
        assert app.active_version == "0.1"
        assert app.description is None

    def test_luis_app_requires_id_and_name(self):
        with pytest.raises(ValidationError):
            LuisApp.model_validate({"name": "Demo"})

    def test_utterance_accepts_pascal_and_camel_case(self):
        pascal = Utterance.model_validate({"UtteranceText": "hi", "ExampleId": -1})
        camel = Utterance.model_validate({"utteranceText": "hi", "exampleId": -1})

        assert pascal == camel
        assert pascal.example_id == -1

    def test_training_defaults_details(self):
        training = Training.model_validate({"modelId": "m-1"})

        assert training.model_id == "m-1"
        assert training.details.status is None

    def test_publish_partial_payload(self):
        publish = Publish.model_validate({"endpointUrl": "https://x", "region": "westus"})

        assert publish.region == "westus"
        assert publish.version_id is None

    def test_service_error_response_shapes(self):
        nested = ServiceErrorResponse.model_validate_json('{"error": {"code": "BadArgument", "message": "m"}}')
        flat = ServiceErrorResponse.model_validate_json('{"statusCode": 401, "message": "denied"}')

        assert nested.error.code == "BadArgument"
        assert flat.error is None
        assert flat.status_code == 401
        assert flat.message == "denied"


class TestRequestModels:
    """Test serialization of request bodies"""

    def test_add_app_request_omits_unset_fields(self):
        request = AddAppRequest(name="Demo", culture="en-us", domain="", initial_version_id=None)

        assert request.to_wire() == {"name": "Demo", "culture": "en-us", "domain": ""}

    def test_rename_app_request_without_description(self):
        assert RenameAppRequest(name="New").to_wire() == {"name": "New"}

    def test_publish_request_sends_boolean(self):
        wire = PublishRequest(version_id="0.1", is_staging=False, region="westus").to_wire()

        assert wire == {"versionId": "0.1", "isStaging": False, "region": "westus"}

    def test_example_accepts_wire_names(self):
        example = Example.model_validate({
            "text": "book a flight to Paris",
            "intentName": "BookFlight",
            "entityLabels": [{"entityName": "City", "startCharIndex": 17, "endCharIndex": 21}]
        })

        assert example.entity_labels[0].entity_name == "City"
        assert example.to_wire()["entityLabels"][0]["startCharIndex"] == 17

    def test_example_defaults_to_no_labels(self):
        assert Example(text="hello", intent_name="Greeting").to_wire() == {
            "text": "hello",
            "intentName": "Greeting",
            "entityLabels": []
        }

    def test_entity_label_rejects_negative_index(self):
        with pytest.raises(ValidationError):
            EntityLabel(entity_name="City", start_char_index=-1, end_char_index=3)
