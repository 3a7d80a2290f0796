import pulumi

from config import SiteConfig
from stacks import site

outputs = site.deploy(SiteConfig.from_pulumi_config())

for name, value in outputs.items():
    pulumi.export(name, value)
