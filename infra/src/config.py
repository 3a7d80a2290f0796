from __future__ import annotations

from dataclasses import dataclass, field

import pulumi

STAGING = "staging"


@dataclass(frozen=True)
class SiteConfig:
    """
    Everything the site stack needs, read once from the Pulumi stack config.

    target_domain == "staging" serves the bucket publicly as an S3 website;
    any other value is treated as a domain fronted by CloudFront.
    """
    name_prefix: str = "static-site"
    website_path: str = "../../dist"
    index_document: str = "index.html"
    error_document: str = "error.html"

    target_domain: str = STAGING
    certificate_arn: str | None = None
    include_www: bool = False
    ipv6: bool = False

    sync_assets_to_bucket: bool = False

    tags: dict[str, str] = field(default_factory=dict)

    @property
    def is_staging(self) -> bool:
        return self.target_domain == STAGING

    @classmethod
    def from_pulumi_config(cls, config: pulumi.Config | None = None) -> SiteConfig:
        config = config or pulumi.Config()
        name_prefix = config.get("namePrefix") or pulumi.get_project()

        def flag(key: str) -> bool:
            value = config.get_bool(key)
            return bool(value) if value is not None else False

        return cls(
            name_prefix=name_prefix,
            website_path=config.get("path") or config.get("pathToWebsiteContents") or cls.website_path,
            index_document=config.get("indexDocument") or cls.index_document,
            error_document=config.get("errorDocument") or cls.error_document,
            target_domain=config.get("targetDomain") or config.get("target") or STAGING,
            certificate_arn=config.get("certificateArn") or None,
            include_www=flag("includeWWW"),
            ipv6=flag("ipv6"),
            sync_assets_to_bucket=flag("syncAssetsToBucket"),
            tags={
                "app": name_prefix,
                "env": pulumi.get_stack(),
                "managed-by": "pulumi",
            },
        )
