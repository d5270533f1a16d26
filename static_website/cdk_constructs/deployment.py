"""Upload of local site assets with a full CloudFront invalidation."""

from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_s3 as s3
from aws_cdk import aws_s3_deployment as s3_deploy
from constructs import Construct

INVALIDATE_ALL = ["/*"]


class SiteDeployment(Construct):
  """Deploys the asset tree to the bucket and invalidates every cached path."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    assets_path: str,
    bucket: s3.IBucket,
    distribution: cloudfront.IDistribution,
  ) -> None:
    super().__init__(scope, id)

    self.distribution_paths = list(INVALIDATE_ALL)

    self.deployment = s3_deploy.BucketDeployment(
      self,
      "DeployWithInvalidation",
      sources=[s3_deploy.Source.asset(assets_path)],
      destination_bucket=bucket,
      distribution=distribution,
      distribution_paths=self.distribution_paths,
    )
