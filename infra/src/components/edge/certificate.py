from __future__ import annotations

from typing import List

import pulumi
import pulumi_aws as aws

from components.dns import lookup_zone_id, split_domain

TEN_MINUTES = 60 * 10


def certificate_domains(target_domain: str, include_www: bool = False) -> List[str]:
    """
    Domain names covered by the certificate, primary name first.

    `www.<target>` is only added for apex domains; "www.blog.example.com" is
    never requested.
    """
    domains = [target_domain]
    if include_www and not split_domain(target_domain).subdomain:
        domains.append(f"www.{target_domain}")
    return domains


def _validation_option(domain: str):
    def pick(options):
        for option in options:
            if option.domain_name == domain:
                return option
        raise ValueError(f"Certificate has no validation option for {domain}")
    return pick


class ValidatedCertificate(pulumi.ComponentResource):
    """
    ACM certificate validated through Route53 DNS records.
    IMPORTANT: CloudFront only accepts certificates from us-east-1.

    `certificate_arn` comes from the CertificateValidation resource, so anything
    consuming it waits until ACM reports the certificate as ISSUED.
    """

    def __init__(
        self,
        name: str,
        target_domain: str,
        *,
        include_www: bool = False,
        tags: dict[str, str] | None = None,
        opts: pulumi.ResourceOptions | None = None,
    ):
        super().__init__("custom:edge:ValidatedCertificate", name, None, opts)

        domains = certificate_domains(target_domain, include_www)
        zone_id = lookup_zone_id(split_domain(target_domain).parent_domain)

        east_provider = aws.Provider(
            f"{name}-us-east-1",
            region="us-east-1",
            profile=aws.config.profile,
            opts=pulumi.ResourceOptions(parent=self),
        )

        self.certificate = aws.acm.Certificate(
            f"{name}-certificate",
            domain_name=target_domain,
            subject_alternative_names=domains[1:],
            validation_method="DNS",
            tags=tags,
            opts=pulumi.ResourceOptions(parent=self, provider=east_provider),
        )

        # One record per covered name, proving we own the domain
        self.validation_records: List[aws.route53.Record] = []
        for index, domain in enumerate(domains):
            option = self.certificate.domain_validation_options.apply(_validation_option(domain))
            suffix = "" if index == 0 else str(index + 1)
            self.validation_records.append(aws.route53.Record(
                f"{target_domain}-validation{suffix}",
                name=option.apply(lambda o: o.resource_record_name),
                type=option.apply(lambda o: o.resource_record_type),
                records=[option.apply(lambda o: o.resource_record_value)],
                zone_id=zone_id,
                ttl=TEN_MINUTES,
                opts=pulumi.ResourceOptions(parent=self),
            ))

        # Creates nothing in AWS; the engine polls ACM until the status is ISSUED
        self.validation = aws.acm.CertificateValidation(
            f"{name}-validation",
            certificate_arn=self.certificate.arn,
            validation_record_fqdns=[r.fqdn for r in self.validation_records],
            opts=pulumi.ResourceOptions(parent=self, provider=east_provider),
        )

        self.domains = domains
        self.certificate_arn = self.validation.certificate_arn

        self.register_outputs({
            "certificate_arn": self.certificate_arn,
        })
