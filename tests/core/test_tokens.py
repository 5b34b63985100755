# tests/core/test_tokens.py
"""Tests for token generation and timing-safe comparison"""

import re
from unittest.mock import patch

import pytest

from csrfguard.core.config import configure
from csrfguard.core.security.tokens import generate_token, timing_safe_equal

HEX_PATTERN = re.compile(r"^[0-9a-f]+$")


class TestGenerateToken:

    @pytest.mark.parametrize("length", [1, 16, 32, 64])
    def test_length_and_alphabet(self, length):
        token = generate_token(length)
        assert len(token) == 2 * length
        assert HEX_PATTERN.match(token)

    def test_default_length_is_configured(self):
        assert len(generate_token()) == 64

    def test_follows_reconfiguration(self):
        configure({"tokenLength": 64})
        assert len(generate_token()) == 128

    def test_tokens_are_unique(self):
        tokens = {generate_token() for _ in range(100)}
        assert len(tokens) == 100

    def test_randomness_failure_propagates(self):
        with patch("csrfguard.core.security.tokens.secrets.token_hex", side_effect=OSError("no entropy")):
            with pytest.raises(OSError, match="no entropy"):
                generate_token()


class TestTimingSafeEqual:

    def test_equal_strings(self):
        assert timing_safe_equal("abc123", "abc123") is True

    def test_same_length_different_content(self):
        assert timing_safe_equal("abc123", "abc124") is False
        assert timing_safe_equal("xbc123", "abc123") is False

    def test_length_mismatch(self):
        assert timing_safe_equal("abc", "abcd") is False
        assert timing_safe_equal("", "a") is False

    def test_empty_strings(self):
        assert timing_safe_equal("", "") is True

    def test_non_ascii(self):
        assert timing_safe_equal("žeton", "žeton") is True
        assert timing_safe_equal("žeton", "zeton") is False

    def test_lone_surrogate_is_a_mismatch(self):
        assert timing_safe_equal("\ud800", "abc") is False
        assert timing_safe_equal("valid-token", "\ud800") is False
        assert timing_safe_equal("\ud800", "\ud800") is True

    def test_non_string_values(self):
        assert timing_safe_equal(None, "abc") is False
        assert timing_safe_equal(["abc"], "abc") is False
        assert timing_safe_equal(123, 123) is False

    def test_uses_compare_digest(self):
        with patch("csrfguard.core.security.tokens.hmac.compare_digest", return_value=True) as compare:
            assert timing_safe_equal("aaaa", "bbbb") is True
        compare.assert_called_once_with(b"aaaa", b"bbbb")
