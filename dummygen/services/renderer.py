# dummygen/services/renderer.py
from __future__ import annotations

import json
from typing import Tuple

from dummygen.core.constants import MediaTypes
from dummygen.schemas.generate import OutputFormat
from dummygen.services.generator import GeneratedData
from dummygen.services.xml_serializer import to_xml

JSON_INDENT = 2


def render_payload(data: GeneratedData, output_format: OutputFormat) -> Tuple[str, str]:
    """Return (body, media type) for the requested output format."""
    if output_format == OutputFormat.XML:
        return to_xml(data), MediaTypes.XML
    return json.dumps(data, indent=JSON_INDENT), MediaTypes.JSON
