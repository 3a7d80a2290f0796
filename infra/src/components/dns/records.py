from __future__ import annotations

from typing import List, Optional

import pulumi
import pulumi_aws as aws

from .hostname import lookup_zone_id, split_domain


def alias_record_types(ipv6: bool) -> List[str]:
    return ["A", "AAAA"] if ipv6 else ["A"]


def create_alias_records(
    name: str,
    record_name: str,
    zone_domain: str,
    distribution: aws.cloudfront.Distribution,
    *,
    ipv6: bool = False,
    opts: Optional[pulumi.ResourceOptions] = None,
) -> List[aws.route53.Record]:
    """
    Point `record_name` at a CloudFront distribution.

    The hosted zone is resolved from the parent of `zone_domain`. One A record
    is created, plus an AAAA twin when `ipv6` is set.
    """
    zone_id = lookup_zone_id(split_domain(zone_domain).parent_domain)

    records = []
    for record_type in alias_record_types(ipv6):
        suffix = "" if record_type == "A" else f"-{record_type.lower()}"
        records.append(aws.route53.Record(
            f"{name}{suffix}",
            name=record_name,
            zone_id=zone_id,
            type=record_type,
            aliases=[aws.route53.RecordAliasArgs(
                name=distribution.domain_name,
                zone_id=distribution.hosted_zone_id,
                evaluate_target_health=True,
            )],
            opts=opts,
        ))
    return records
