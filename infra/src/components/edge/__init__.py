from .certificate import ValidatedCertificate, certificate_domains
from .site_cdn import SiteDistribution, SiteDistributionArgs, distribution_aliases
