"""HMAC signatures for inbound webhook bodies.

GitHub signs each delivery with the shared secret and sends the digest in
``X-Hub-Signature-256`` as ``sha256=<hex>``. Older deployments only send the
SHA-1 variant in ``X-Hub-Signature``. Both are checked against the raw body
before it reaches the codec.
"""

from __future__ import annotations

import hashlib
import hmac

SIGNATURE_HEADER = "X-Hub-Signature-256"
LEGACY_SIGNATURE_HEADER = "X-Hub-Signature"

_ALGORITHMS = {
    "sha256": hashlib.sha256,
    "sha1": hashlib.sha1,
}


def compute_signature(secret: str, body: bytes, *, algorithm: str = "sha256") -> str:
    """Return the ``<algorithm>=<hex digest>`` header value for ``body``.

    Raises
    ------
    ValueError
        If ``algorithm`` is neither ``sha256`` nor ``sha1``.

    """
    try:
        digest = _ALGORITHMS[algorithm]
    except KeyError as exc:
        msg = f"unsupported signature algorithm: {algorithm!r}"
        raise ValueError(msg) from exc
    mac = hmac.new(secret.encode("utf-8"), body, digest)
    return f"{algorithm}={mac.hexdigest()}"


def verify_signature(secret: str, body: bytes, signature: str | None) -> bool:
    """Return True when ``signature`` matches ``body`` under ``secret``.

    An empty secret disables verification and accepts every body. A missing
    or malformed header, or an unknown algorithm prefix, is rejected.
    """
    if not secret:
        return True
    if not signature:
        return False

    algorithm, sep, _digest = signature.strip().partition("=")
    if not sep or algorithm not in _ALGORITHMS:
        return False

    expected = compute_signature(secret, body, algorithm=algorithm)
    return hmac.compare_digest(expected, signature.strip())


__all__ = [
    "LEGACY_SIGNATURE_HEADER",
    "SIGNATURE_HEADER",
    "compute_signature",
    "verify_signature",
]
