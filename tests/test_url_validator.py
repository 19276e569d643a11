"""Tests for SSRF checks on job page URLs."""

from __future__ import annotations

import socket
from unittest.mock import patch

import pytest

from clayface.utils.url_validator import SSRFError, validate_url


class TestValidateUrl:
    def test_blocks_localhost(self):
        with pytest.raises(SSRFError, match="Blocked internal hostname"):
            validate_url("http://localhost/jobs")

    @pytest.mark.parametrize(
        "url",
        [
            "http://127.0.0.1/jobs",
            "http://[::1]/jobs",
            "http://10.0.0.1/jobs",
            "http://192.168.1.1/jobs",
            "http://169.254.169.254/latest/meta-data",
        ],
    )
    def test_blocks_private_ip_literals(self, url):
        with pytest.raises(SSRFError, match="Blocked private/internal IP"):
            validate_url(url)

    def test_blocks_hostname_resolving_to_private_ip(self):
        fake_result = [(2, 1, 6, "", ("10.0.0.5", 0))]
        with patch("socket.getaddrinfo", return_value=fake_result):
            with pytest.raises(SSRFError, match="resolves to blocked address"):
                validate_url("http://jobs.internal.example.com/posting")

    def test_allows_public_ip_literal(self):
        assert validate_url("https://142.250.80.46/careers") == "https://142.250.80.46/careers"

    def test_allows_public_hostname(self):
        fake_result = [(2, 1, 6, "", ("151.101.1.140", 0))]
        with patch("socket.getaddrinfo", return_value=fake_result):
            assert validate_url("https://jobs.example.com/123") == "https://jobs.example.com/123"

    def test_rejects_file_scheme(self):
        with pytest.raises(ValueError, match="Unsupported URL scheme"):
            validate_url("file:///etc/passwd")

    def test_rejects_empty_hostname(self):
        with pytest.raises(ValueError, match="No hostname"):
            validate_url("http:///path")

    def test_rejects_unresolvable_hostname(self):
        with patch("socket.getaddrinfo", side_effect=socket.gaierror("Name resolution failed")):
            with pytest.raises(ValueError, match="Cannot resolve hostname"):
                validate_url("http://no-such-host-xyz123.example/path")
