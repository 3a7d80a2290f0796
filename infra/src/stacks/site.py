from typing import Any, Dict

import pulumi

from components.dns import split_domain
from components.edge import SiteDistribution, SiteDistributionArgs, ValidatedCertificate
from components.storage import (
    CdnBucketAccess,
    PublicBucketAccess,
    SiteBuckets,
    SiteBucketsArgs,
    resolve_site_root,
    upload_assets,
)
from config import SiteConfig
from utils.logging import get_logger

logger = get_logger()


def deploy(cfg: SiteConfig) -> Dict[str, Any]:
    """
    Static site: S3 content bucket, then either
    - staging: public S3 website
    - domain:  private bucket + CloudFront + ACM certificate + Route53 aliases

    Returns the stack outputs; the caller exports them.
    """
    # Bad input fails here, before anything is declared
    if not cfg.is_staging:
        split_domain(cfg.target_domain)
    resolve_site_root(cfg.website_path)

    prefix = cfg.name_prefix

    site = SiteBuckets(
        prefix,
        SiteBucketsArgs(
            index_document=cfg.index_document,
            error_document=cfg.error_document,
            tags=cfg.tags,
        ),
    )

    outputs: Dict[str, Any] = {
        "contentBucketUri": site.bucket_uri,
        "contentBucketWebsiteEndpoint": site.website_endpoint,
    }

    if cfg.is_staging:
        logger.info("Serving bucket as a public website", extra={"stack": pulumi.get_stack()})
        access = PublicBucketAccess(f"{prefix}-public", site.content_bucket)
        upload_assets(
            prefix,
            site.content_bucket,
            cfg.website_path,
            acl=access.acl,
            depends_on=access.upload_dependencies,
            sync_each_file=cfg.sync_assets_to_bucket,
        )
        outputs["targetDomainEndpoint"] = pulumi.Output.concat("http://", site.website_endpoint)
        return outputs

    if cfg.certificate_arn:
        logger.info("Using existing certificate", extra={"certificate_arn": cfg.certificate_arn})
        certificate_arn = cfg.certificate_arn
    else:
        certificate = ValidatedCertificate(
            f"{prefix}-cert",
            cfg.target_domain,
            include_www=cfg.include_www,
            tags=cfg.tags,
        )
        certificate_arn = certificate.certificate_arn

    cdn = SiteDistribution(
        prefix,
        site.content_bucket,
        site.logs_bucket,
        SiteDistributionArgs(
            target_domain=cfg.target_domain,
            certificate_arn=certificate_arn,
            include_www=cfg.include_www,
            index_document=cfg.index_document,
            ipv6=cfg.ipv6,
            tags=cfg.tags,
        ),
    )

    logger.info("Serving bucket through CloudFront", extra={"target_domain": cfg.target_domain})
    access = CdnBucketAccess(f"{prefix}-cdn-access", site.content_bucket, cdn.oai_iam_arn)
    upload_assets(
        prefix,
        site.content_bucket,
        cfg.website_path,
        acl=access.acl,
        depends_on=access.upload_dependencies,
        sync_each_file=cfg.sync_assets_to_bucket,
    )

    outputs.update({
        "targetDomainEndpoint": f"https://{cfg.target_domain}/",
        "cloudFrontDomain": cdn.domain_name,
        "certificateArn": certificate_arn,
    })
    return outputs
