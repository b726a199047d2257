"""Link encoding, decoding and the generate/open service."""

from .decode_link import decode_link
from .encode_link import encode_link
from .LineLink import LineLink
from .LinkService import LinkService
from .OpenTarget import OpenTarget

__all__ = [
    "LineLink",
    "LinkService",
    "OpenTarget",
    "decode_link",
    "encode_link",
]
