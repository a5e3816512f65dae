"""
JSON codec for Vec2.

Vectors are written as a two element array, [x, y]. Two historical
encodings are read back:

    [3, 4]              array form (the only form ever written)
    {"X": 3, "Y": 4}    keyed form, kept for older producers

Decoding tries the array form first, then the keyed form. If both fail
a ParseError is raised, chained to the keyed form's validation error.
"""

import logging
import math
from typing import Annotated, Any, List, Tuple, Union

from pydantic import AliasChoices, AllowInfNan, BaseModel, ConfigDict, Field, StrictFloat, TypeAdapter, ValidationError

from .config import get_config
from .errors import EncodeError, ParseError
from .vec2 import Vec2


logger = logging.getLogger(__name__)


# JSON numbers only: NaN/Infinity tokens and out of range values like 1e400 are rejected
JsonFloat = Annotated[StrictFloat, AllowInfNan(False)]

_ARRAY_FORM = TypeAdapter(Tuple[JsonFloat, JsonFloat])


class KeyedVec2(BaseModel):
    """Legacy keyed encoding. Missing keys read as 0, unknown keys are ignored."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    x: JsonFloat = Field(default=0.0, validation_alias=AliasChoices("X", "x"))
    y: JsonFloat = Field(default=0.0, validation_alias=AliasChoices("Y", "y"))


def to_list(v: Vec2) -> List[float]:
    """
    Array form of a vector as Python data.

    Used as the pydantic serializer when Vec2 is a model field type.

    Raises:
        EncodeError: a component is NaN or infinite.
    """
    if not (math.isfinite(v.x) and math.isfinite(v.y)):
        raise EncodeError(f"cannot encode non-finite vector {v!r} as JSON")
    return [float(v.x), float(v.y)]


def encode(v: Vec2) -> str:
    """Encode a vector as a JSON array string."""
    x, y = to_list(v)
    return _ARRAY_FORM.dump_json((x, y)).decode("utf-8")


def decode(data: Union[str, bytes, bytearray]) -> Vec2:
    """
    Decode a vector from JSON text.

    The array must hold exactly two finite numbers. Older decoders padded
    short arrays with zeros, dropped extra items and read null as the
    origin; [1], [1, 2, 3] and null are all rejected here.

    Args:
        data: JSON text holding either [x, y] or {"X": x, "Y": y}.

    Raises:
        ParseError: data matches neither form.
    """
    try:
        x, y = _ARRAY_FORM.validate_json(data)
    except ValidationError:
        pass
    else:
        return Vec2(x, y)

    try:
        keyed = KeyedVec2.model_validate_json(data)
    except ValidationError as e:
        logger.debug(f"Rejected vector JSON {_preview(data)}: {e.error_count()} validation error(s)")
        raise ParseError(f"invalid vector JSON: {_preview(data)}", data=data) from e

    _log_legacy(data)
    return Vec2(keyed.x, keyed.y)


def decode_python(obj: Any) -> Vec2:
    """
    Decode a vector from already parsed data.

    Accepts a Vec2, a two item sequence, or a mapping with X/Y keys.
    Used as the pydantic validator when Vec2 is a model field type.
    """
    if isinstance(obj, Vec2):
        return obj

    try:
        x, y = _ARRAY_FORM.validate_python(obj)
    except ValidationError:
        pass
    else:
        return Vec2(x, y)

    try:
        keyed = KeyedVec2.model_validate(obj)
    except ValidationError as e:
        logger.debug(f"Rejected vector data {_preview(obj)}: {e.error_count()} validation error(s)")
        raise ParseError(f"invalid vector data: {_preview(obj)}", data=obj) from e

    _log_legacy(obj)
    return Vec2(keyed.x, keyed.y)


def _log_legacy(data: Any) -> None:
    logger.log(get_config().legacy_level, f"Decoded vector from legacy keyed form: {_preview(data)}")


def _preview(data: Any, limit: int = 80) -> str:
    text = repr(data)
    if len(text) > limit:
        return text[:limit - 3] + "..."
    return text
