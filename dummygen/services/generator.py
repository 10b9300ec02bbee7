"""
Dummy data generator
Builds nested mappings of synthetic fields for a GenerationRequest
"""
from __future__ import annotations

import random
import uuid
from typing import Any, Callable, Dict, List, Optional, Union

from dummygen.core.constants import NodeKeys
from dummygen.schemas.generate import FieldType, GenerationRequest

GeneratedNode = Dict[str, Any]
GeneratedData = Union[GeneratedNode, List[GeneratedNode]]

BASE36_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
FRACTION_DIGITS = 11
# leading digits dropped from the fraction; the rest become the token
TOKEN_OFFSET = 5
NUMBER_CEILING = 1000
EMAIL_DOMAIN = "example.com"


def _base36_fraction(value: float, digits: int = FRACTION_DIGITS) -> str:
    """Base-36 digits of a fraction in [0, 1), most significant first."""
    out = []
    for _ in range(digits):
        value *= 36
        digit = int(value)
        out.append(BASE36_DIGITS[digit])
        value -= digit
        if not value:
            break
    return "".join(out)


def random_string(rng: random.Random) -> str:
    while True:
        token = _base36_fraction(rng.random())[TOKEN_OFFSET:]
        if token:
            return token


def random_number(rng: random.Random) -> int:
    return rng.randrange(NUMBER_CEILING)


def random_boolean(rng: random.Random) -> bool:
    return rng.random() > 0.5


def random_uuid(rng: random.Random) -> str:
    # version 4 ids always come from OS randomness, never from rng
    return str(uuid.uuid4())


def random_email(rng: random.Random) -> str:
    return f"user{random_number(rng)}@{EMAIL_DOMAIN}"


VALUE_FACTORIES: Dict[FieldType, Callable[[random.Random], Any]] = {
    FieldType.STRING: random_string,
    FieldType.NUMBER: random_number,
    FieldType.BOOLEAN: random_boolean,
    FieldType.UUID: random_uuid,
    FieldType.EMAIL: random_email,
}


def generate(
    fields: int,
    sub_modules: int,
    array_size: int,
    field_type: Union[FieldType, str] = FieldType.STRING,
    rng: Optional[random.Random] = None,
) -> GeneratedData:
    """
    Generate one dummy node, or `array_size` copies of it.

    The node holds `field1`..`fieldN` with values of `field_type`. With
    `sub_modules > 0` it also holds `subModules`: a list of `sub_modules`
    results generated with the same parameters and one less level of nesting.

    When `array_size > 1` the result is a list holding the same node object
    `array_size` times; copies are not regenerated. Any smaller `array_size`,
    zero included, returns the bare node.

    Args:
        fields: number of `fieldN` keys
        sub_modules: remaining nesting budget
        array_size: replication count
        field_type: value type; unknown names fall back to string
        rng: random source; a fresh SystemRandom when omitted

    Returns:
        A GeneratedNode or a list of references to one GeneratedNode
    """
    rng = rng or random.SystemRandom()
    try:
        make_value = VALUE_FACTORIES[FieldType(field_type)]
    except ValueError:
        make_value = random_string

    node: GeneratedNode = {}
    for i in range(fields):
        node[NodeKeys.field(i + 1)] = make_value(rng)

    if sub_modules > 0:
        node[NodeKeys.SUB_MODULES] = [
            generate(fields, sub_modules - 1, array_size, field_type, rng)
            for _ in range(sub_modules)
        ]

    if array_size > 1:
        return [node] * array_size

    return node


def generate_for_request(
    request: GenerationRequest,
    rng: Optional[random.Random] = None,
) -> GeneratedData:
    return generate(
        request.fields,
        request.sub_modules,
        request.array_size,
        request.field_type,
        rng=rng,
    )
