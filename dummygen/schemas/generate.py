# dummygen/schemas/generate.py
from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from dummygen.core.constants import Defaults, FormFields
from dummygen.core.settings import BaseConfig, settings

log = logging.getLogger("dummygen.schemas.generate")


class OutputFormat(str, Enum):
    JSON = "json"
    XML = "xml"


class FieldType(str, Enum):
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    UUID = "uuid"
    EMAIL = "email"


class GenerationRequest(BaseModel):
    """Shape of one generation: how many fields, how deep, how many copies."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    output_format: OutputFormat = Field(default=OutputFormat.JSON, alias=FormFields.FORMAT)
    fields: int = Field(default=Defaults.FIELDS, ge=0)
    sub_modules: int = Field(default=Defaults.SUB_MODULES, ge=0, alias=FormFields.SUB_MODULES)
    array_size: int = Field(default=Defaults.ARRAY_SIZE, ge=0, alias=FormFields.ARRAY_SIZE)
    field_type: FieldType = Field(default=FieldType.STRING, alias=FormFields.FIELD_TYPE)


def _text(raw: Any) -> str:
    if raw is None:
        return ""
    return str(raw).strip()


def _parse_int(name: str, raw: Any, default: int, ceiling: int) -> int:
    """
    Text -> int with the form's fallback rules.

    Missing or blank text gives the default, and so does text that is not an
    integer. Negative values clamp to 0 and values above `ceiling` clamp to it.
    """
    text = _text(raw)
    if not text:
        return default
    try:
        value = int(text)
    except ValueError:
        log.debug(
            "generation_request_defaulted",
            extra={"field": name, "raw": text, "default": default},
        )
        return default

    if value < 0:
        return 0
    if value > ceiling:
        log.warning(
            "generation_request_clamped",
            extra={"field": name, "requested": value, "ceiling": ceiling},
        )
        return ceiling
    return value


def _parse_format(raw: Any) -> OutputFormat:
    # anything but exactly "xml" is rendered as JSON
    if _text(raw) == OutputFormat.XML.value:
        return OutputFormat.XML
    return OutputFormat(Defaults.FORMAT)


def _parse_field_type(raw: Any) -> FieldType:
    try:
        return FieldType(_text(raw))
    except ValueError:
        return FieldType(Defaults.FIELD_TYPE)


def estimate_output_values(fields: int, sub_modules: int, array_size: int) -> int:
    """
    Number of values a generation writes out: every field plus one per node.

    Replicas share a node in memory but are serialized once per copy, and
    `array_size` applies again at every nesting level.
    """
    copies = max(array_size, 1)
    total = copies * (fields + 1)
    for depth in range(1, sub_modules + 1):
        total = copies * (fields + 1 + depth * total)
    return total


def _fit_output_budget(
    fields: int, sub_modules: int, array_size: int, budget: int
) -> Tuple[int, int, int]:
    """Shrink array_size, then sub_modules, then fields until the output fits."""
    requested = (fields, sub_modules, array_size)

    while array_size > 1 and estimate_output_values(fields, sub_modules, array_size) > budget:
        array_size -= 1
    while sub_modules > 0 and estimate_output_values(fields, sub_modules, array_size) > budget:
        sub_modules -= 1
    while fields > 0 and estimate_output_values(fields, sub_modules, array_size) > budget:
        fields -= 1

    if (fields, sub_modules, array_size) != requested:
        log.warning(
            "generation_request_clamped",
            extra={
                "field": "output",
                "requested": list(requested),
                "granted": [fields, sub_modules, array_size],
                "ceiling": budget,
            },
        )
    return fields, sub_modules, array_size


def parse_generation_request(
    form: Mapping[str, Any],
    config: Optional[BaseConfig] = None,
) -> GenerationRequest:
    """
    Build a GenerationRequest from raw form values.

    Every coercion rule lives here; nothing downstream re-checks the input.
    Each number is clamped to its own ceiling first, then the three together
    are shrunk to fit MAX_OUTPUT_VALUES.

    Args:
        form: submitted form fields (values are text, any may be absent)
        config: settings holding the generation ceilings

    Returns:
        A validated GenerationRequest
    """
    config = config or settings
    fields = _parse_int(
        FormFields.FIELDS, form.get(FormFields.FIELDS), Defaults.FIELDS, config.MAX_FIELDS
    )
    sub_modules = _parse_int(
        FormFields.SUB_MODULES,
        form.get(FormFields.SUB_MODULES),
        Defaults.SUB_MODULES,
        config.MAX_SUB_MODULES,
    )
    array_size = _parse_int(
        FormFields.ARRAY_SIZE,
        form.get(FormFields.ARRAY_SIZE),
        Defaults.ARRAY_SIZE,
        config.MAX_ARRAY_SIZE,
    )
    fields, sub_modules, array_size = _fit_output_budget(
        fields, sub_modules, array_size, config.MAX_OUTPUT_VALUES
    )

    return GenerationRequest(
        output_format=_parse_format(form.get(FormFields.FORMAT)),
        fields=fields,
        sub_modules=sub_modules,
        array_size=array_size,
        field_type=_parse_field_type(form.get(FormFields.FIELD_TYPE)),
    )
