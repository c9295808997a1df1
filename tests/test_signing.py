"""Tests for temporary URL HMAC signing."""
from __future__ import annotations

import hashlib
import hmac

from swift_objects.signing import HmacSigner, canonical_string, sign


class TestCanonicalString:
    """Tests for canonical_string."""

    def test_format(self):
        """Canonical string is method, expires and path joined by newlines."""
        assert canonical_string("GET", 1323479485, "/v1/AUTH_a/c/o") == "GET\n1323479485\n/v1/AUTH_a/c/o"

    def test_path_is_not_reencoded(self):
        """The path is used exactly as given."""
        canonical = canonical_string("PUT", 1, "/v1/AUTH_a/c/my file.txt")
        assert canonical.endswith("/v1/AUTH_a/c/my file.txt")


class TestSign:
    """Tests for sign and HmacSigner."""

    def test_matches_hmac_sha1(self):
        """Signature is the hex HMAC-SHA1 of the canonical string."""
        canonical = canonical_string("GET", 1323479485, "/v1/AUTH_account/container/object")
        expected = hmac.new(b"mykey", canonical.encode("utf-8"), hashlib.sha1).hexdigest()

        assert sign("mykey", canonical) == expected
        assert len(expected) == 40

    def test_deterministic(self):
        """Same inputs always produce the same signature."""
        canonical = canonical_string("HEAD", 42, "/v1/a/c/o")
        assert sign(b"secret", canonical) == sign(b"secret", canonical)

    def test_str_and_bytes_secret_agree(self):
        """A str secret is UTF-8 encoded."""
        canonical = canonical_string("GET", 42, "/v1/a/c/o")
        assert sign("sécret", canonical) == sign("sécret".encode("utf-8"), canonical)

    def test_different_secret_different_signature(self):
        canonical = canonical_string("GET", 42, "/v1/a/c/o")
        assert sign("one", canonical) != sign("two", canonical)

    def test_method_is_case_sensitive(self):
        """'get' and 'GET' sign differently."""
        assert sign("k", canonical_string("GET", 1, "/p")) != sign("k", canonical_string("get", 1, "/p"))

    def test_signer_uses_injected_digest(self):
        """HmacSigner defaults to SHA1 and accepts another digest."""
        canonical = canonical_string("GET", 1, "/p")
        assert HmacSigner().sign("k", canonical) == sign("k", canonical)
        assert HmacSigner(hashlib.sha256).sign("k", canonical) == hmac.new(
            b"k", canonical.encode(), hashlib.sha256
        ).hexdigest()
