from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import pulumi
import pulumi_aws as aws


@dataclass(frozen=True)
class SiteBucketsArgs:
    index_document: str = "index.html"
    error_document: str = "error.html"
    force_destroy: bool = True
    tags: Optional[dict[str, str]] = None


class SiteBuckets(pulumi.ComponentResource):
    """
    Content bucket (configured as a static website) + private logs bucket.

    Who may read the content bucket is decided separately, by
    PublicBucketAccess or CdnBucketAccess.
    """

    def __init__(
        self,
        name: str,
        args: SiteBucketsArgs,
        opts: pulumi.ResourceOptions | None = None,
    ):
        super().__init__("custom:storage:SiteBuckets", name, None, opts)

        parent_opts = pulumi.ResourceOptions(parent=self)

        self.content_bucket = aws.s3.Bucket(
            f"{name}-content",
            force_destroy=args.force_destroy,
            tags=args.tags,
            opts=parent_opts,
        )

        self.website = aws.s3.BucketWebsiteConfiguration(
            f"{name}-website",
            bucket=self.content_bucket.bucket,
            index_document=aws.s3.BucketWebsiteConfigurationIndexDocumentArgs(
                suffix=args.index_document,
            ),
            error_document=aws.s3.BucketWebsiteConfigurationErrorDocumentArgs(
                key=args.error_document,
            ),
            opts=parent_opts,
        )

        # CloudFront request logs
        self.logs_bucket = aws.s3.Bucket(
            f"{name}-logs",
            force_destroy=True,
            tags=args.tags,
            opts=parent_opts,
        )

        # CloudFront legacy standard logs need ACLs enabled (not BucketOwnerEnforced)
        logs_ownership = aws.s3.BucketOwnershipControls(
            f"{name}-logs-ownership",
            bucket=self.logs_bucket.id,
            rule=aws.s3.BucketOwnershipControlsRuleArgs(object_ownership="BucketOwnerPreferred"),
            opts=parent_opts,
        )

        aws.s3.BucketPublicAccessBlock(
            f"{name}-logs-pab",
            bucket=self.logs_bucket.id,
            block_public_acls=True,
            ignore_public_acls=True,
            block_public_policy=True,
            restrict_public_buckets=True,
            opts=parent_opts,
        )

        aws.s3.BucketAcl(
            f"{name}-logs-acl",
            bucket=self.logs_bucket.id,
            acl="private",
            opts=pulumi.ResourceOptions(parent=self, depends_on=[logs_ownership]),
        )

        self.bucket_uri = pulumi.Output.concat("s3://", self.content_bucket.bucket)
        self.website_endpoint = self.website.website_endpoint

        self.register_outputs({
            "bucket_uri": self.bucket_uri,
            "website_endpoint": self.website_endpoint,
        })
