"""Pytest fixtures for Pulumi component tests."""

from typing import List

import pulumi
import pytest

ZONE_ID = "Z1234567890"


class RecordingMocks(pulumi.runtime.Mocks):
    """Stands in for the Pulumi engine and remembers everything declared."""

    zone_id = ZONE_ID

    def __init__(self) -> None:
        self.resources: List[pulumi.runtime.MockResourceArgs] = []
        self.calls: List[pulumi.runtime.MockCallArgs] = []

    def new_resource(self, args: pulumi.runtime.MockResourceArgs):
        self.resources.append(args)
        outputs = dict(args.inputs)
        name = args.name

        if args.typ == "aws:s3/bucket:Bucket":
            outputs.update({
                "bucket": name,
                "arn": f"arn:aws:s3:::{name}",
                "bucketDomainName": f"{name}.s3.amazonaws.com",
                "bucketRegionalDomainName": f"{name}.s3.us-east-1.amazonaws.com",
            })
        elif args.typ.startswith("aws:s3/bucketWebsiteConfiguration"):
            outputs.update({
                "websiteEndpoint": f"{name}.s3-website-us-east-1.amazonaws.com",
                "websiteDomain": "s3-website-us-east-1.amazonaws.com",
            })
        elif args.typ == "aws:acm/certificate:Certificate":
            domains = [args.inputs["domainName"]] + list(args.inputs.get("subjectAlternativeNames") or [])
            outputs.update({
                "arn": f"arn:aws:acm:us-east-1:123456789012:certificate/{name}",
                "domainValidationOptions": [
                    {
                        "domainName": domain,
                        "resourceRecordName": f"_acme.{domain}.",
                        "resourceRecordType": "CNAME",
                        "resourceRecordValue": f"_token.{domain}.acm-validations.aws.",
                    }
                    for domain in domains
                ],
            })
        elif args.typ == "aws:route53/record:Record":
            outputs["fqdn"] = args.inputs.get("name")
        elif args.typ == "aws:cloudfront/originAccessIdentity:OriginAccessIdentity":
            outputs.update({
                "iamArn": f"arn:aws:iam::cloudfront:user/CloudFront Origin Access Identity {name}",
                "cloudfrontAccessIdentityPath": f"origin-access-identity/cloudfront/{name}",
            })
        elif args.typ == "aws:cloudfront/distribution:Distribution":
            outputs.update({
                "arn": f"arn:aws:cloudfront::123456789012:distribution/{name}",
                "domainName": "d111111abcdef8.cloudfront.net",
                "hostedZoneId": "Z2FDTNDATAQYW2",
            })

        return [f"{name}_id", outputs]

    def call(self, args: pulumi.runtime.MockCallArgs):
        self.calls.append(args)
        if args.token == "aws:route53/getZone:getZone":
            return {"zoneId": self.zone_id, "name": args.args.get("name")}
        if args.token == "aws:iam/getPolicyDocument:getPolicyDocument":
            return {"json": "{}", "id": "policy"}
        return {}

    def of_type(self, typ: str) -> List[pulumi.runtime.MockResourceArgs]:
        return [r for r in self.resources if r.typ == typ]


@pytest.fixture
def mocks() -> RecordingMocks:
    """Fresh mocked engine for every test."""
    m = RecordingMocks()
    pulumi.runtime.set_mocks(m, project="static-site", stack="test", preview=False)
    return m


@pytest.fixture
def preview_mocks() -> RecordingMocks:
    """Mocked engine running a preview (dry run)."""
    m = RecordingMocks()
    pulumi.runtime.set_mocks(m, project="static-site", stack="test", preview=True)
    return m
