"""vect - 2D vector value type with a JSON codec."""

from .vec2 import NORMALIZE_EPSILON, ORIGIN, Vec2, fclamp
from .codec import decode, decode_python, encode, to_list
from .config import CodecConfig, get_config, reset_config, set_config
from .errors import EncodeError, ParseError, VectError

__all__ = [
    "Vec2",
    "ORIGIN",
    "NORMALIZE_EPSILON",
    "fclamp",
    "encode",
    "decode",
    "decode_python",
    "to_list",
    "CodecConfig",
    "get_config",
    "set_config",
    "reset_config",
    "VectError",
    "ParseError",
    "EncodeError",
]
