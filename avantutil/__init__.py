"""Small utilities for network servers: MIME types, clock, singletons, byte buffers, base64, SHA-1, URLs and object pools."""

__version__ = "0.1.0"

__all__ = [
    "base64codec",
    "buffer",
    "clock",
    "mime_type",
    "object_pool",
    "sha1",
    "singleton",
    "url",
]