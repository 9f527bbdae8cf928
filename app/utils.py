"""the beautiful world start from here."""

from __future__ import annotations

import hashlib
import hmac

SIGNATURE_PREFIX = "sha256="


def _body_bytes(raw_body: bytes | str) -> bytes:
    if isinstance(raw_body, (bytes, bytearray, memoryview)):
        return bytes(raw_body)
    if isinstance(raw_body, str):
        return raw_body.encode("utf-8")
    raise TypeError(f"unsupported body type: {type(raw_body).__name__}")


def sign_body(raw_body: bytes | str, secret: str) -> str:
    """
    Compute the ``X-Hub-Signature-256`` value GitHub would send for ``raw_body``.

    Example
    -------
    sign_body(b'{}', 'secret') → 'sha256=<64 hex chars>'
    """
    mac = hmac.new(secret.encode("utf-8"), msg=_body_bytes(raw_body), digestmod=hashlib.sha256)
    return SIGNATURE_PREFIX + mac.hexdigest()


def gh_verify(
    raw_body: bytes | str,
    signature_header: str | None,
    secret: str | None,
) -> bool:
    """
    Verify GitHub webhook HMAC signature (X-Hub-Signature-256).

    The digest is computed over the body exactly as received. Parsing and
    re-serializing the JSON first would change key order and whitespace.

    Returns
    -------
    bool
        True if valid, False otherwise (including unset secret or header).
    """
    if not secret or not signature_header:
        return False
    try:
        expected = sign_body(raw_body, secret).encode("ascii")
        supplied = signature_header.encode("ascii")
    except (TypeError, ValueError, AttributeError):
        return False
    if len(expected) != len(supplied):
        return False
    return hmac.compare_digest(expected, supplied)


def parse_topic_id(s: str | None) -> int | None:
    """Return a positive int topic_id or None if invalid."""
    try:
        v = int(s)  # type: ignore[arg-type]
        return v if v > 0 else None
    except (ValueError, TypeError):
        return None


def parse_bool(s: str | None, default: bool = False) -> bool:
    """Interpret common truthy/falsy env strings."""
    if s is None:
        return default
    value = s.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return default
