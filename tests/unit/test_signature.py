"""Unit tests for webhook HMAC signatures."""

from __future__ import annotations

import hashlib
import hmac

import pytest

from buildhook.api.signature import compute_signature, verify_signature

_SECRET = "supersecretcode"
_BODY = b"type:   push\nowner:  alice\nrepo:   widget\nbranch: main\ncommit: abc123\n"


def test_compute_signature_matches_hmac_sha256() -> None:
    """The header value is sha256= followed by the hex HMAC digest."""
    expected = hmac.new(_SECRET.encode(), _BODY, hashlib.sha256).hexdigest()
    assert compute_signature(_SECRET, _BODY) == f"sha256={expected}"


def test_compute_signature_supports_sha1() -> None:
    """The legacy algorithm is available for X-Hub-Signature."""
    expected = hmac.new(_SECRET.encode(), _BODY, hashlib.sha1).hexdigest()
    assert compute_signature(_SECRET, _BODY, algorithm="sha1") == f"sha1={expected}"


def test_compute_signature_rejects_unknown_algorithm() -> None:
    """Only sha256 and sha1 are supported."""
    with pytest.raises(ValueError, match="md5"):
        compute_signature(_SECRET, _BODY, algorithm="md5")


class TestVerifySignature:
    """Tests for verify_signature."""

    @pytest.mark.parametrize("algorithm", ["sha256", "sha1"])
    def test_accepts_valid_signature(self, algorithm: str) -> None:
        """A signature computed with the shared secret is accepted."""
        signature = compute_signature(_SECRET, _BODY, algorithm=algorithm)
        assert verify_signature(_SECRET, _BODY, signature)

    def test_empty_secret_accepts_anything(self) -> None:
        """Without a secret, verification is disabled."""
        assert verify_signature("", _BODY, None)
        assert verify_signature("", _BODY, "sha256=garbage")

    @pytest.mark.parametrize(
        "signature",
        [None, "", "sha256", "sha256=", "md5=abcd", "sha256=deadbeef"],
    )
    def test_rejects_missing_or_malformed(self, signature: str | None) -> None:
        """Missing, malformed, or wrong signatures are rejected."""
        assert not verify_signature(_SECRET, _BODY, signature)

    def test_rejects_tampered_body(self) -> None:
        """A signature for one body does not validate another."""
        signature = compute_signature(_SECRET, _BODY)
        assert not verify_signature(_SECRET, _BODY + b"x", signature)

    def test_rejects_wrong_secret(self) -> None:
        """A signature made with another secret is rejected."""
        signature = compute_signature("other", _BODY)
        assert not verify_signature(_SECRET, _BODY, signature)
