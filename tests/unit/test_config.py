"""Tests for SiteConfig."""

from typing import Dict, Optional

import pytest

from config import STAGING, SiteConfig


class StubConfig:
    """Minimal stand-in for pulumi.Config backed by a dict."""

    def __init__(self, values: Dict[str, str]) -> None:
        self.values = values

    def get(self, key: str) -> Optional[str]:
        return self.values.get(key)

    def get_bool(self, key: str) -> Optional[bool]:
        value = self.values.get(key)
        if value is None:
            return None
        return value.lower() == "true"


class TestSiteConfig:
    """Test SiteConfig defaults."""

    def test_default_values(self) -> None:
        config = SiteConfig()

        assert config.index_document == "index.html"
        assert config.error_document == "error.html"
        assert config.target_domain == STAGING
        assert config.certificate_arn is None
        assert config.include_www is False
        assert config.sync_assets_to_bucket is False
        assert config.ipv6 is False
        assert config.is_staging is True

    def test_domain_is_not_staging(self) -> None:
        assert SiteConfig(target_domain="example.com").is_staging is False

    def test_is_frozen(self) -> None:
        with pytest.raises(AttributeError):
            SiteConfig().target_domain = "example.com"


class TestFromPulumiConfig:
    """Test SiteConfig.from_pulumi_config."""

    def test_empty_config_uses_defaults(self, mocks) -> None:
        config = SiteConfig.from_pulumi_config(StubConfig({}))

        assert config.name_prefix == "static-site"
        assert config.website_path == SiteConfig.website_path
        assert config.target_domain == STAGING
        assert config.tags == {"app": "static-site", "env": "test", "managed-by": "pulumi"}

    def test_reads_all_keys(self, mocks) -> None:
        config = SiteConfig.from_pulumi_config(StubConfig({
            "namePrefix": "docs",
            "path": "./www",
            "indexDocument": "home.html",
            "errorDocument": "oops.html",
            "targetDomain": "example.com",
            "certificateArn": "arn:aws:acm:us-east-1:123456789012:certificate/abc",
            "includeWWW": "true",
            "syncAssetsToBucket": "true",
            "ipv6": "false",
        }))

        assert config.name_prefix == "docs"
        assert config.website_path == "./www"
        assert config.index_document == "home.html"
        assert config.error_document == "oops.html"
        assert config.target_domain == "example.com"
        assert config.certificate_arn == "arn:aws:acm:us-east-1:123456789012:certificate/abc"
        assert config.include_www is True
        assert config.sync_assets_to_bucket is True
        assert config.ipv6 is False
        assert config.tags["app"] == "docs"

    def test_alias_keys(self, mocks) -> None:
        config = SiteConfig.from_pulumi_config(StubConfig({
            "pathToWebsiteContents": "../public",
            "target": "example.org",
        }))

        assert config.website_path == "../public"
        assert config.target_domain == "example.org"

    def test_primary_keys_win_over_aliases(self, mocks) -> None:
        config = SiteConfig.from_pulumi_config(StubConfig({
            "path": "./www",
            "pathToWebsiteContents": "../public",
            "targetDomain": "example.com",
            "target": "example.org",
        }))

        assert config.website_path == "./www"
        assert config.target_domain == "example.com"
