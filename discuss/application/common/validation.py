"""
Validation Gate - checks raw form input against a named schema.

    fields = validate_form(FormSchema.UPDATE_TOPIC, {"description": "..."})
    # -> {"description": "..."}   (absent fields are not returned)

A key that is missing or mapped to None is absent. An empty string is
present and has to pass the field rule. Violations raise
DomainValidationError with a field-keyed map of messages.
"""

from enum import Enum
from typing import Any, Mapping

from pydantic import BaseModel, ValidationError

from discuss.application.common.results import FORM_ERRORS_KEY
from discuss.application.dto.forms import (
    CreateCommentForm,
    CreatePostForm,
    CreateTopicForm,
    UpdatePostForm,
    UpdateTopicForm,
)
from discuss.domain.exceptions import DomainValidationError


class FormSchema(str, Enum):
    CREATE_TOPIC = "create-topic"
    UPDATE_TOPIC = "update-topic"
    CREATE_POST = "create-post"
    UPDATE_POST = "update-post"
    CREATE_COMMENT = "create-comment"


_SCHEMAS: dict[FormSchema, type[BaseModel]] = {
    FormSchema.CREATE_TOPIC: CreateTopicForm,
    FormSchema.UPDATE_TOPIC: UpdateTopicForm,
    FormSchema.CREATE_POST: CreatePostForm,
    FormSchema.UPDATE_POST: UpdatePostForm,
    FormSchema.CREATE_COMMENT: CreateCommentForm,
}


def field_errors_from(error: ValidationError) -> dict[str, list[str]]:
    """Flatten pydantic errors into {field: [message, ...]} in reported order."""
    field_errors: dict[str, list[str]] = {}
    for item in error.errors():
        loc = item.get("loc") or ()
        key = str(loc[0]) if loc else FORM_ERRORS_KEY
        field_errors.setdefault(key, []).append(item["msg"])
    return field_errors


def validate_form(schema: FormSchema | str, raw: Mapping[str, Any]) -> dict[str, Any]:
    model = _SCHEMAS[FormSchema(schema)]
    present = {key: value for key, value in raw.items() if value is not None}
    try:
        form = model.model_validate(present)
    except ValidationError as e:
        raise DomainValidationError(field_errors_from(e)) from e
    return form.model_dump(exclude_unset=True)
