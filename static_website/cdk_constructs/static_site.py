"""Composite construct for a complete static website."""

from aws_cdk import Stack
from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_s3 as s3
from constructs import Construct

from ..config import SiteConfig
from .access import CloudFrontAccess
from .deployment import SiteDeployment
from .distribution import CloudFrontDistribution
from .storage import StorageBucket, site_bucket_name


class StaticSite(Construct):
  """Static website served from a private S3 bucket through CloudFront.

  Nothing is declared until ``build()`` is called, which creates:
  - S3 bucket, unique per account and region, destroyed with the stack
  - Origin Access Identity with read access to the bucket objects
  - CloudFront distribution using the bucket through that identity
  - Deployment of the local assets with a full cache invalidation

  ``build()`` must be called exactly once.
  """

  bucket: s3.Bucket | None
  distribution: cloudfront.Distribution | None
  access_identity: cloudfront.OriginAccessIdentity | None
  deployment: SiteDeployment | None

  def __init__(self, scope: Construct, site: SiteConfig) -> None:
    super().__init__(scope, site.domain)

    self.site = site
    self.bucket = None
    self.distribution = None
    self.access_identity = None
    self.deployment = None

  def build(self) -> "StaticSite":
    """Declare all site resources in dependency order."""
    bucket = self._create_bucket()
    access_identity = self._allow_cloudfront_access(bucket)
    distribution = self._create_distribution(bucket, access_identity)
    deployment = self._upload_static_assets(bucket, distribution)

    self.bucket = bucket
    self.access_identity = access_identity
    self.distribution = distribution
    self.deployment = deployment
    return self

  def _create_bucket(self) -> s3.Bucket:
    stack = Stack.of(self)
    storage = StorageBucket(
      self,
      "SiteBucket",
      bucket_name=site_bucket_name(self.site.domain, stack.account, stack.region),
    )
    return storage.bucket

  def _allow_cloudfront_access(
    self, bucket: s3.Bucket
  ) -> cloudfront.OriginAccessIdentity:
    access = CloudFrontAccess(self, "CloudFrontAccess", bucket=bucket)
    return access.identity

  def _create_distribution(
    self,
    bucket: s3.Bucket,
    access_identity: cloudfront.OriginAccessIdentity,
  ) -> cloudfront.Distribution:
    cdn = CloudFrontDistribution(
      self,
      "SiteDistribution",
      bucket=bucket,
      origin_access_identity=access_identity,
    )
    # The grant must exist before anything points CloudFront at the bucket
    if bucket.policy is not None:
      cdn.node.add_dependency(bucket.policy)
    return cdn.distribution

  def _upload_static_assets(
    self,
    bucket: s3.Bucket,
    distribution: cloudfront.Distribution,
  ) -> SiteDeployment:
    return SiteDeployment(
      self,
      "SiteDeployment",
      assets_path=self.site.assets_path,
      bucket=bucket,
      distribution=distribution,
    )
