"""Files subpackage: single-file JSON read/write and the decode cache."""

from json_dirtree.files.cache import DecodeCache
from json_dirtree.files.codec import encode_value, locate, read_value, write_value

__all__ = ["DecodeCache", "encode_value", "locate", "read_value", "write_value"]
