"""
Service layer
Data generation and serialization
"""
from dummygen.services.generator import (
    GeneratedData,
    GeneratedNode,
    generate,
    generate_for_request,
)
from dummygen.services.xml_serializer import to_xml
from dummygen.services.renderer import render_payload

__all__ = [
    # Generator
    "GeneratedData",
    "GeneratedNode",
    "generate",
    "generate_for_request",

    # Serialization
    "to_xml",
    "render_payload",
]
