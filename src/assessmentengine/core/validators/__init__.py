"""Validators for each question-type family."""

from .base import DEFAULT_MESSAGES, BaseTypeValidator, MessageCatalog, TypeValidator, ValidatorConfig
from .choice import MultiChoiceValidator, SingleChoiceValidator
from .file_upload import FileUploadValidator
from .numeric import NumericValidator
from .text import TextValidator, compile_pattern


def default_validators(config: ValidatorConfig | None = None) -> list[BaseTypeValidator]:
    """One validator per question-type family, sharing ``config``."""
    return [
        TextValidator(config=config),
        NumericValidator(config=config),
        SingleChoiceValidator(config=config),
        MultiChoiceValidator(config=config),
        FileUploadValidator(config=config),
    ]


__all__ = [
    "DEFAULT_MESSAGES",
    "BaseTypeValidator",
    "FileUploadValidator",
    "MessageCatalog",
    "MultiChoiceValidator",
    "NumericValidator",
    "SingleChoiceValidator",
    "TextValidator",
    "TypeValidator",
    "ValidatorConfig",
    "compile_pattern",
    "default_validators",
]
