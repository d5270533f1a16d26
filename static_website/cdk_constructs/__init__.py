"""CDK constructs for static website infrastructure."""

from .access import CloudFrontAccess
from .deployment import SiteDeployment
from .distribution import CloudFrontDistribution
from .static_site import StaticSite
from .storage import StorageBucket, site_bucket_name

__all__ = [
  "CloudFrontAccess",
  "CloudFrontDistribution",
  "SiteDeployment",
  "StaticSite",
  "StorageBucket",
  "site_bucket_name",
]
