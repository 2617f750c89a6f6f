"""Shared pytest fixtures."""

from unittest.mock import AsyncMock, Mock

import pytest

NIGHTLY_URL = "https://wordpress.org/nightly-builds/wordpress-latest.zip"
STABLE_URL = "https://downloads.wordpress.org/release/wordpress-5.3.2.zip"


@pytest.fixture
def version_check_body():
    """A core version-check response as seen by a site running 5.4-beta1."""
    nightly = {
        "download": NIGHTLY_URL,
        "locale": "en_US",
        "packages": {
            "full": NIGHTLY_URL,
            "no_content": False,
            "new_bundled": False,
            "partial": False,
            "rollback": False,
        },
        "current": "5.4-beta3-47380",
        "version": "5.4-beta3-47380",
        "php_version": "5.6.20",
        "mysql_version": "5.0",
        "new_bundled": "5.3",
        "partial_version": False,
    }
    return {
        "offers": [
            {
                "response": "upgrade",
                "download": STABLE_URL,
                "locale": "en_US",
                "packages": {
                    "full": STABLE_URL,
                    "no_content": "https://downloads.wordpress.org/release/wordpress-5.3.2-no-content.zip",
                    "new_bundled": "https://downloads.wordpress.org/release/wordpress-5.3.2-new-bundled.zip",
                    "partial": False,
                    "rollback": False,
                },
                "current": "5.3.2",
                "version": "5.3.2",
                "php_version": "5.6.20",
                "mysql_version": "5.0",
                "new_bundled": "5.3",
                "partial_version": False,
            },
            {"response": "development", **nightly},
            {"response": "autoupdate", **nightly, "new_files": True},
        ],
        "translations": [],
    }


@pytest.fixture
def make_probe():
    """Build a probe stub that reports only the given URLs as existing."""
    def _make(*existing):
        probe = Mock()
        probe.exists = AsyncMock(side_effect=lambda url: url in existing)
        return probe
    return _make
