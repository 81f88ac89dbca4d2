"""Validation helpers for uploaded images."""

from fridge_chef.domain.errors import InputError

_GENERIC_CONTENT_TYPES = {"application/octet-stream"}


def validate_image(
    image_bytes: bytes, content_type: str | None, max_bytes: int
) -> None:
    """Reject uploads that are empty, too large or declared as non-images."""
    if not image_bytes:
        raise InputError("No image provided")
    if len(image_bytes) > max_bytes:
        raise InputError(
            f"Image is too large ({len(image_bytes)} bytes, limit {max_bytes})"
        )
    if content_type and not (
        content_type.startswith("image/") or content_type in _GENERIC_CONTENT_TYPES
    ):
        raise InputError(f"Unsupported file type: {content_type}")


def detect_mime_type(image_bytes: bytes) -> str:
    """Infer a basic image MIME type from file signatures."""
    if image_bytes.startswith(b"\xff\xd8\xff"):
        return "image/jpeg"
    if image_bytes.startswith(b"\x89PNG\r\n\x1a\n"):
        return "image/png"
    if image_bytes[:4] == b"RIFF" and image_bytes[8:12] == b"WEBP":
        return "image/webp"
    if image_bytes[:6] in {b"GIF87a", b"GIF89a"}:
        return "image/gif"
    return "image/jpeg"
