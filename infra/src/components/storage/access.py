from __future__ import annotations

from typing import List

import pulumi
import pulumi_aws as aws


class PublicBucketAccess(pulumi.ComponentResource):
    """
    Bucket served directly as a public S3 website.

    Objects are uploaded with a public-read ACL, so the bucket must accept
    object ACLs and must not block public ones.
    """

    acl = "public-read"

    def __init__(
        self,
        name: str,
        bucket: aws.s3.Bucket,
        opts: pulumi.ResourceOptions | None = None,
    ):
        super().__init__("custom:storage:PublicBucketAccess", name, None, opts)

        self.ownership_controls = aws.s3.BucketOwnershipControls(
            f"{name}-ownership",
            bucket=bucket.bucket,
            rule=aws.s3.BucketOwnershipControlsRuleArgs(
                object_ownership="ObjectWriter",
            ),
            opts=pulumi.ResourceOptions(parent=self),
        )

        self.public_access_block = aws.s3.BucketPublicAccessBlock(
            f"{name}-public-access-block",
            bucket=bucket.bucket,
            block_public_acls=False,
            block_public_policy=False,
            ignore_public_acls=False,
            restrict_public_buckets=False,
            opts=pulumi.ResourceOptions(parent=self),
        )

        self.register_outputs({})

    @property
    def upload_dependencies(self) -> List[pulumi.Resource]:
        return [self.ownership_controls, self.public_access_block]


def cdn_read_policy(bucket_arn: pulumi.Input[str], oai_iam_arn: pulumi.Input[str]) -> pulumi.Output[str]:
    """Policy document letting only the CloudFront identity read objects."""
    return aws.iam.get_policy_document_output(
        statements=[aws.iam.GetPolicyDocumentStatementArgs(
            sid="AllowCloudFrontRead",
            effect="Allow",
            principals=[aws.iam.GetPolicyDocumentStatementPrincipalArgs(
                type="AWS",
                identifiers=[oai_iam_arn],
            )],
            actions=["s3:GetObject"],
            resources=[pulumi.Output.concat(bucket_arn, "/*")],
        )]
    ).json


class CdnBucketAccess(pulumi.ComponentResource):
    """
    Private bucket readable only through a CloudFront Origin Access Identity.
    """

    acl = "private"

    def __init__(
        self,
        name: str,
        bucket: aws.s3.Bucket,
        oai_iam_arn: pulumi.Input[str],
        opts: pulumi.ResourceOptions | None = None,
    ):
        super().__init__("custom:storage:CdnBucketAccess", name, None, opts)

        # pulumi_synced_folder always sends an ACL, so ACLs stay enabled even here
        self.ownership_controls = aws.s3.BucketOwnershipControls(
            f"{name}-ownership",
            bucket=bucket.id,
            rule=aws.s3.BucketOwnershipControlsRuleArgs(
                object_ownership="BucketOwnerPreferred",
            ),
            opts=pulumi.ResourceOptions(parent=self),
        )

        self.public_access_block = aws.s3.BucketPublicAccessBlock(
            f"{name}-public-access-block",
            bucket=bucket.id,
            block_public_acls=True,
            ignore_public_acls=True,
            block_public_policy=True,
            restrict_public_buckets=True,
            opts=pulumi.ResourceOptions(parent=self),
        )

        self.bucket_policy = aws.s3.BucketPolicy(
            f"{name}-bucket-policy",
            bucket=bucket.id,
            policy=cdn_read_policy(bucket.arn, oai_iam_arn),
            opts=pulumi.ResourceOptions(parent=self, depends_on=[self.public_access_block]),
        )

        self.register_outputs({})

    @property
    def upload_dependencies(self) -> List[pulumi.Resource]:
        return [self.ownership_controls, self.bucket_policy]
