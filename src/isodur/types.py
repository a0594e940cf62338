"""Pydantic field type that reads and writes durations as ISO 8601 text.

Use it on any model that carries a duration:

class Job(BaseModel):
    timeout: IsoDuration

Job(timeout="PT30S").model_dump() == {"timeout": "PT30S"}
"""

from typing import Annotated, Any

from pydantic import GetJsonSchemaHandler
from pydantic_core import core_schema

from isodur.duration import Duration
from isodur.formatter import format_duration
from isodur.parser import parse_duration


class _IsoDurationAnnotation:
    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: Any
    ) -> core_schema.CoreSchema:
        """Validate text through parse_duration, serialize through format_duration."""

        def validate_duration(value: Any) -> Any:
            if isinstance(value, str):
                # DurationError is a ValueError, so pydantic reports it
                return parse_duration(value)
            return value

        return core_schema.no_info_before_validator_function(
            validate_duration,
            handler(source_type),
            serialization=core_schema.plain_serializer_function_ser_schema(
                format_duration,
                info_arg=False,
                return_schema=core_schema.str_schema(),
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> dict[str, Any]:
        return {"type": "string", "format": "duration"}


IsoDuration = Annotated[Duration, _IsoDurationAnnotation]
