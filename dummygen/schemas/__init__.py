from dummygen.schemas.generate import (
    FieldType,
    GenerationRequest,
    OutputFormat,
    estimate_output_values,
    parse_generation_request,
)

__all__ = [
    "FieldType",
    "GenerationRequest",
    "OutputFormat",
    "estimate_output_values",
    "parse_generation_request",
]
