"""
Unit tests for URL normalization and favicon addressing.
"""

import base64

import pytest

from favicon_fetch.exceptions import InvalidURLError
from favicon_fetch.utils import (
    build_favicon_url,
    cache_key,
    ensure_scheme,
    normalize_target,
    to_data_uri,
)


class TestEnsureScheme:
    """Test scheme normalization."""

    def test_adds_https_when_missing(self):
        assert ensure_scheme("example.com") == "https://example.com"

    def test_keeps_existing_scheme(self):
        assert ensure_scheme("http://example.com") == "http://example.com"
        assert ensure_scheme("https://example.com") == "https://example.com"

    def test_lowercases_input(self):
        assert ensure_scheme("HTTP://Example.COM/Path") == "http://example.com/path"
        assert ensure_scheme("Example.COM") == "https://example.com"

    def test_other_schemes_get_prefixed(self):
        assert ensure_scheme("ftp://files.example.com") == "https://ftp://files.example.com"


class TestNormalizeTarget:
    """Test TargetReference derivation."""

    def test_bare_domain(self):
        target = normalize_target("example.com")

        assert target.raw_input == "example.com"
        assert target.normalized_url == "https://example.com"
        assert target.hostname == "example.com"

    def test_hostname_from_full_url(self):
        target = normalize_target("HTTPS://User@Sub.Example.com:8443/some/Path?q=1")

        assert target.hostname == "sub.example.com"
        assert target.normalized_url == "https://user@sub.example.com:8443/some/path?q=1"

    def test_subdomains_are_distinct(self):
        assert normalize_target("www.example.com").hostname == "www.example.com"
        assert normalize_target("example.com").hostname == "example.com"

    def test_surrounding_whitespace_is_ignored(self):
        target = normalize_target("  example.com \n")

        assert target.normalized_url == "https://example.com"
        assert target.hostname == "example.com"

    def test_internationalized_hostname_is_punycoded(self):
        assert normalize_target("bücher.de").hostname == "xn--bcher-kva.de"

    def test_ipv6_literal_keeps_brackets(self):
        assert normalize_target("http://[0:0::1]:8080/").hostname == "[::1]"

    @pytest.mark.parametrize(
        "url",
        [
            "https://",
            "http:///path-only",
            "https://[not-ipv6",
            "example.com:notaport",
            "exa mple.com",
            "https://exa<mple.com",
        ],
    )
    def test_invalid_input_raises(self, url):
        with pytest.raises(InvalidURLError) as exc_info:
            normalize_target(url)

        assert exc_info.value.url == url

    def test_invalid_url_error_is_value_error(self):
        with pytest.raises(ValueError):
            normalize_target("https://")


class TestAddressing:
    """Test cache key, lookup URL and data URI construction."""

    def test_cache_key(self):
        assert cache_key("example.com") == "favicon/example.com"
        assert cache_key("www.example.com") == "favicon/www.example.com"

    def test_favicon_url_embeds_target_verbatim(self):
        assert (
            build_favicon_url("https://example.com")
            == "https://www.google.com/s2/favicons?domain=https://example.com&sz=64"
        )

    def test_end_to_end_example(self):
        target = normalize_target("example.com")

        assert cache_key(target.hostname) == "favicon/example.com"
        assert (
            build_favicon_url(target.normalized_url)
            == "https://www.google.com/s2/favicons?domain=https://example.com&sz=64"
        )

    def test_data_uri(self):
        data = b"\x00\x01binary\xff"
        uri = to_data_uri(data)

        assert uri.startswith("data:image/png;base64,")
        assert base64.b64decode(uri.split(",", 1)[1]) == data

    def test_data_uri_empty_payload(self):
        assert to_data_uri(b"") == "data:image/png;base64,"
