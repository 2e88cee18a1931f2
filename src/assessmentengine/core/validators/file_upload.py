"""File-upload response validation."""

from __future__ import annotations

from typing import Any

from ...schemas import FileDescriptor, Question, ValidationRule
from ..coercion import as_file
from ..results import FieldError
from .base import BaseTypeValidator, format_limit


class FileUploadValidator(BaseTypeValidator):
    question_types = ("file-upload",)

    def validate(self, question: Question, value: Any) -> list[FieldError]:
        descriptor = as_file(value)
        if descriptor is None:
            return [self._error(question, "custom", "invalid_file")]
        if not descriptor.name:
            return []

        rule = question.validation
        if rule is None:
            return []

        errors: list[FieldError] = []
        if rule.file_types and not self._extension_allowed(descriptor, rule.file_types):
            errors.append(
                self._error(question, "fileType", "file_type", allowed=", ".join(rule.file_types))
            )
        errors.extend(self._size_errors(question, descriptor, rule))
        return errors

    @staticmethod
    def _extension_allowed(descriptor: FileDescriptor, file_types: list[str]) -> bool:
        extension = descriptor.extension
        allowed = {file_type.lower().lstrip(".") for file_type in file_types}
        return bool(extension) and extension in allowed

    def _size_errors(
        self,
        question: Question,
        descriptor: FileDescriptor,
        rule: ValidationRule,
    ) -> list[FieldError]:
        # Unknown or zero size skips the size bounds.
        if not descriptor.size:
            return []
        size_mb = descriptor.size / self._config.bytes_per_megabyte
        errors: list[FieldError] = []
        if rule.max_file_size and size_mb > rule.max_file_size:
            errors.append(
                self._error(question, "fileSize", "max_file_size", limit=format_limit(rule.max_file_size))
            )
        if rule.min_file_size and size_mb < rule.min_file_size:
            errors.append(
                self._error(question, "fileSize", "min_file_size", limit=format_limit(rule.min_file_size))
            )
        return errors
