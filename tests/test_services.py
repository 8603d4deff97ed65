"""Tests for the service layer, schema registry and configuration."""

import logging

import pytest

import body_validator as v
from body_validator import (
    InvalidBodyError,
    SchemaError,
    SchemaNotFoundError,
    SchemaRegistry,
    ValidationConfig,
    ValidationResult,
    assert_valid,
    collect_messages,
    validate,
)


@pytest.fixture
def hero():
    return v.object({
        "name": v.string,
        "age": v.number,
        "cool": v.optional(v.boolean),
        "powers": v.array(v.string),
    })


@pytest.fixture(autouse=True)
def clean_registry():
    """Start and end every test with an empty registry."""
    SchemaRegistry.clear()
    yield
    SchemaRegistry.clear()


# =============================================================================
# validate / assert_valid / collect_messages
# =============================================================================


class TestValidate:
    def test_valid_result(self, hero):
        result = validate(hero, {"name": "Superman", "age": 35, "powers": ["flight"]})

        assert result == ValidationResult(valid=True, messages=[], name="input")
        assert result.to_dict() == {"valid": True, "messages": []}

    def test_invalid_result(self, hero):
        result = validate(hero, {"name": "Superman"})

        assert not result.valid
        assert result.messages == [
            '"input"."age" is not a number',
            '"input"."powers" is not an array',
        ]
        assert result.to_dict()["valid"] is False

    def test_custom_root_name(self, hero):
        result = validate(hero, {"name": "Superman", "age": 1}, name="body")

        assert result.name == "body"
        assert result.messages == ['"body"."powers" is not an array']

    def test_logs_rejections_at_debug(self, hero, caplog):
        with caplog.at_level(logging.DEBUG, logger="body_validator.services"):
            validate(hero, {"name": "Superman"})

        assert "input rejected with 2 message(s)" in caplog.text


class TestAssertValid:
    def test_returns_value_unchanged(self, hero):
        body = {"name": "Superman", "age": 35, "powers": []}

        assert assert_valid(hero, body) is body

    def test_raises_with_messages(self, hero):
        with pytest.raises(InvalidBodyError) as exc_info:
            assert_valid(hero, {"name": "Superman", "age": 35}, name="body")

        assert exc_info.value.name == "body"
        assert exc_info.value.messages == ['"body"."powers" is not an array']
        assert "body failed validation" in str(exc_info.value)


class TestCollectMessages:
    def test_concatenates_in_order(self):
        messages = collect_messages([
            (v.object({"page": v.integer}), {"page": 1.5}, "query"),
            (v.string, "ok", "header"),
            (v.array(v.string), [1], "body"),
        ])

        assert messages == [
            '"query"."page" is not an integer',
            '"body[0]" is not a string',
        ]

    def test_empty(self):
        assert collect_messages([]) == []


# =============================================================================
# Registry
# =============================================================================


class TestSchemaRegistry:
    def test_register_and_get(self, hero):
        SchemaRegistry.register("createHero", hero)

        assert SchemaRegistry.is_registered("createHero")
        assert SchemaRegistry.get("createHero") is hero

    def test_register_is_idempotent(self, hero):
        SchemaRegistry.register("createHero", hero)
        SchemaRegistry.register("createHero", hero)

        assert SchemaRegistry.list_registered() == ["createHero"]

    def test_register_conflict_raises(self, hero):
        SchemaRegistry.register("createHero", hero)

        with pytest.raises(SchemaError, match="already registered"):
            SchemaRegistry.register("createHero", v.string)

    def test_register_requires_validator(self):
        with pytest.raises(SchemaError):
            SchemaRegistry.register("bad", {"name": "string"})

    def test_register_rejects_validator_classes(self):
        with pytest.raises(SchemaError):
            SchemaRegistry.register("bad", v.ObjectValidator)

        assert not SchemaRegistry.is_registered("bad")

    def test_unknown_schema(self, hero):
        SchemaRegistry.register("createHero", hero)

        with pytest.raises(SchemaNotFoundError) as exc_info:
            SchemaRegistry.get("deleteHero")

        assert isinstance(exc_info.value, KeyError)
        assert "createHero" in str(exc_info.value)

    def test_list_is_sorted(self):
        SchemaRegistry.register("b", v.string)
        SchemaRegistry.register("a", v.number)

        assert SchemaRegistry.list_registered() == ["a", "b"]

    def test_validate_by_name(self, hero):
        SchemaRegistry.register("createHero", hero)

        result = SchemaRegistry.validate("createHero", {"name": "Superman", "age": 1})

        assert result.messages == ['"createHero"."powers" is not an array']

    def test_validate_with_label(self, hero):
        SchemaRegistry.register("createHero", hero)

        result = SchemaRegistry.validate("createHero", {"name": 1}, label="input")

        assert result.messages[0] == '"input"."name" is not a string'


# =============================================================================
# Configuration
# =============================================================================


class TestValidationConfig:
    @pytest.fixture(autouse=True)
    def clean_env(self, monkeypatch):
        for var in (
            "BODY_VALIDATOR_ROOT_NAME",
            "BODY_VALIDATOR_STATUS_CODE",
            "BODY_VALIDATOR_LOG_REJECTIONS",
        ):
            monkeypatch.delenv(var, raising=False)

    def test_defaults(self):
        config = ValidationConfig.from_env()

        assert config == ValidationConfig(root_name="body", status_code=422, log_rejections=False)

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("BODY_VALIDATOR_ROOT_NAME", "payload")
        monkeypatch.setenv("BODY_VALIDATOR_STATUS_CODE", "400")
        monkeypatch.setenv("BODY_VALIDATOR_LOG_REJECTIONS", "Yes")

        config = ValidationConfig.from_env()

        assert config.root_name == "payload"
        assert config.status_code == 400
        assert config.log_rejections is True

    def test_invalid_status_code(self, monkeypatch):
        monkeypatch.setenv("BODY_VALIDATOR_STATUS_CODE", "teapot")

        with pytest.raises(ValueError, match="BODY_VALIDATOR_STATUS_CODE"):
            ValidationConfig.from_env()

    @pytest.mark.parametrize("status", ["200", "99", "302", "600"])
    def test_status_code_must_be_an_error_status(self, monkeypatch, status):
        monkeypatch.setenv("BODY_VALIDATOR_STATUS_CODE", status)

        with pytest.raises(ValueError, match="400-599"):
            ValidationConfig.from_env()

    @pytest.mark.parametrize("status", ["400", "599"])
    def test_status_code_bounds_are_inclusive(self, monkeypatch, status):
        monkeypatch.setenv("BODY_VALIDATOR_STATUS_CODE", status)

        assert ValidationConfig.from_env().status_code == int(status)
