"""Dependency injection container for the assessment engine."""

from __future__ import annotations

from dependency_injector import containers, providers

from .core import EvaluationCache, FieldValidator, ResponseAggregator, ValidatorConfig
from .core.validators import (
    FileUploadValidator,
    MultiChoiceValidator,
    NumericValidator,
    SingleChoiceValidator,
    TextValidator,
)
from .pipeline import EvaluationPipeline


class EngineContainer(containers.DeclarativeContainer):
    """Dependency-injector container definition."""

    config = providers.Configuration(default={"max_entries": 256})

    validator_config = providers.Singleton(ValidatorConfig)

    text_validator = providers.Singleton(TextValidator, config=validator_config)
    numeric_validator = providers.Singleton(NumericValidator, config=validator_config)
    single_choice_validator = providers.Singleton(SingleChoiceValidator, config=validator_config)
    multi_choice_validator = providers.Singleton(MultiChoiceValidator, config=validator_config)
    file_upload_validator = providers.Singleton(FileUploadValidator, config=validator_config)

    validators = providers.List(
        text_validator,
        numeric_validator,
        single_choice_validator,
        multi_choice_validator,
        file_upload_validator,
    )

    field_validator = providers.Singleton(
        FieldValidator,
        validators=validators,
        config=validator_config,
    )

    cache = providers.Singleton(EvaluationCache, max_entries=config.max_entries)

    aggregator = providers.Singleton(
        ResponseAggregator,
        field_validator=field_validator,
        cache=cache,
    )

    pipeline = providers.Factory(EvaluationPipeline, aggregator=aggregator)


def create_container(*, settings: dict | None = None) -> EngineContainer:
    """Instantiate container with optional overrides."""

    container = EngineContainer()

    if not settings:
        return container

    validation_settings = settings.get("validation", {}) if isinstance(settings, dict) else {}
    if validation_settings:
        validator_config = ValidatorConfig(**validation_settings)
        container.validator_config.override(providers.Object(validator_config))

    cache_settings = settings.get("cache", {}) if isinstance(settings, dict) else {}
    if cache_settings:
        container.config.override({"max_entries": cache_settings.get("max_entries", 256)})
        if cache_settings.get("enabled") is False:
            container.cache.override(providers.Object(None))

    return container
