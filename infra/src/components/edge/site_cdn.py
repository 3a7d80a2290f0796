from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

import pulumi
import pulumi_aws as aws

from components.dns import create_alias_records

from .certificate import certificate_domains

TEN_MINUTES = 60 * 10


@dataclass(frozen=True)
class SiteDistributionArgs:
    """
    CloudFront in front of a private S3 bucket, reached through an Origin
    Access Identity, serving `target_domain` with an ACM certificate.
    """
    target_domain: str
    certificate_arn: pulumi.Input[str]
    include_www: bool = False
    index_document: str = "index.html"
    not_found_page: str = "/404.html"
    ipv6: bool = False
    price_class: str = "PriceClass_100"
    tags: Optional[dict[str, str]] = None


def distribution_aliases(target_domain: str, include_www: bool = False) -> List[str]:
    """Same names the certificate covers: www is only aliased for apex domains."""
    return certificate_domains(target_domain, include_www)


class SiteDistribution(pulumi.ComponentResource):
    """
    Creates:
    - Origin Access Identity (the only principal allowed to read the bucket)
    - CloudFront distribution with access logs in the logs bucket
    - Route53 alias record(s) for the domain, and for www when requested
    """

    def __init__(
        self,
        name: str,
        content_bucket: aws.s3.Bucket,
        logs_bucket: aws.s3.Bucket,
        args: SiteDistributionArgs,
        opts: pulumi.ResourceOptions | None = None,
    ):
        super().__init__("custom:edge:SiteDistribution", name, None, opts)

        parent_opts = pulumi.ResourceOptions(parent=self)
        aliases = distribution_aliases(args.target_domain, args.include_www)

        self.origin_access_identity = aws.cloudfront.OriginAccessIdentity(
            f"{name}-oai",
            comment="this is needed to setup s3 polices and make s3 not public.",
            opts=parent_opts,
        )

        self.distribution = aws.cloudfront.Distribution(
            f"{name}-cdn",
            enabled=True,
            is_ipv6_enabled=args.ipv6,
            aliases=aliases,
            origins=[aws.cloudfront.DistributionOriginArgs(
                origin_id=content_bucket.arn,
                domain_name=content_bucket.bucket_regional_domain_name,
                s3_origin_config=aws.cloudfront.DistributionOriginS3OriginConfigArgs(
                    origin_access_identity=self.origin_access_identity.cloudfront_access_identity_path,
                ),
            )],
            default_root_object=args.index_document,
            default_cache_behavior=aws.cloudfront.DistributionDefaultCacheBehaviorArgs(
                target_origin_id=content_bucket.arn,
                viewer_protocol_policy="redirect-to-https",
                allowed_methods=["GET", "HEAD", "OPTIONS"],
                cached_methods=["GET", "HEAD", "OPTIONS"],
                forwarded_values=aws.cloudfront.DistributionDefaultCacheBehaviorForwardedValuesArgs(
                    cookies=aws.cloudfront.DistributionDefaultCacheBehaviorForwardedValuesCookiesArgs(
                        forward="none",
                    ),
                    query_string=False,
                ),
                min_ttl=0,
                default_ttl=TEN_MINUTES,
                max_ttl=TEN_MINUTES,
            ),
            # "100" is the least broad and least expensive
            price_class=args.price_class,
            custom_error_responses=[aws.cloudfront.DistributionCustomErrorResponseArgs(
                error_code=404,
                response_code=404,
                response_page_path=args.not_found_page,
            )],
            restrictions=aws.cloudfront.DistributionRestrictionsArgs(
                geo_restriction=aws.cloudfront.DistributionRestrictionsGeoRestrictionArgs(
                    restriction_type="none",
                ),
            ),
            viewer_certificate=aws.cloudfront.DistributionViewerCertificateArgs(
                acm_certificate_arn=args.certificate_arn,
                ssl_support_method="sni-only",
                minimum_protocol_version="TLSv1.2_2021",
            ),
            logging_config=aws.cloudfront.DistributionLoggingConfigArgs(
                bucket=logs_bucket.bucket_domain_name,
                include_cookies=False,
                prefix=f"{args.target_domain}/",
            ),
            tags=args.tags,
            opts=parent_opts,
        )

        record_opts = pulumi.ResourceOptions(parent=self, depends_on=[self.distribution])

        self.alias_records = create_alias_records(
            args.target_domain,
            args.target_domain,
            args.target_domain,
            self.distribution,
            ipv6=args.ipv6,
            opts=record_opts,
        )
        if f"www.{args.target_domain}" in aliases:
            self.alias_records += create_alias_records(
                f"{args.target_domain}-www-alias",
                f"www.{args.target_domain}",
                args.target_domain,
                self.distribution,
                ipv6=args.ipv6,
                opts=record_opts,
            )

        self.domain_name = self.distribution.domain_name
        self.distribution_id = self.distribution.id
        self.oai_iam_arn = self.origin_access_identity.iam_arn

        self.register_outputs({
            "domain_name": self.domain_name,
            "distribution_id": self.distribution_id,
            "oai_iam_arn": self.oai_iam_arn,
        })
