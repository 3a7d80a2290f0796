from typing import NamedTuple

import pulumi
import pulumi_aws as aws

# Placeholder used while previewing so no live Route53 query is made.
DRY_RUN_ZONE_ID = "Z000000"


class InvalidDomainError(ValueError):
    """Raised when a domain name cannot be split into subdomain and parent zone."""


class DomainParts(NamedTuple):
    subdomain: str
    parent_domain: str


def split_domain(domain: str) -> DomainParts:
    """
    Split a domain into its leaf label and the parent zone name.

    - "example.com"     -> ("", "example.com")
    - "www.example.com" -> ("www", "example.com.")
    """
    parts = domain.split(".")
    if len(parts) < 2:
        raise InvalidDomainError(f"No TLD found on {domain}")

    # Apex domain, e.g. awesome-website.com
    if len(parts) == 2:
        return DomainParts("", domain)

    # Trailing "." canonicalizes the zone name
    return DomainParts(parts[0], ".".join(parts[1:]) + ".")


def lookup_zone_id(parent_domain: str) -> pulumi.Output[str]:
    """Hosted zone id for `parent_domain`, or a placeholder during preview."""
    if pulumi.runtime.is_dry_run():
        return pulumi.Output.from_input(DRY_RUN_ZONE_ID)

    return aws.route53.get_zone_output(name=parent_domain).zone_id
