from .decoding import decode, decode_bytes, read_ascii_pixels, read_binary_pixels
from .encoding import encode, write, write_ascii_pixels, write_binary_pixels
from .header import ByteScanner, Header, format_header, parse_int, read_header

__all__ = [
    "ByteScanner",
    "decode",
    "decode_bytes",
    "encode",
    "format_header",
    "Header",
    "parse_int",
    "read_ascii_pixels",
    "read_binary_pixels",
    "read_header",
    "write",
    "write_ascii_pixels",
    "write_binary_pixels",
]
