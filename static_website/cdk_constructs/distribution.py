"""CloudFront distribution for static website."""

from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_cloudfront_origins as origins
from aws_cdk import aws_s3 as s3
from constructs import Construct


class CloudFrontDistribution(Construct):
  """CloudFront distribution with the private bucket as its only origin."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    bucket: s3.IBucket,
    origin_access_identity: cloudfront.IOriginAccessIdentity,
  ) -> None:
    super().__init__(scope, id)

    # REST endpoint through the OAI, never the public website endpoint
    origin = origins.S3BucketOrigin.with_origin_access_identity(
      bucket,
      origin_access_identity=origin_access_identity,
    )

    self.distribution = cloudfront.Distribution(
      self,
      "Distribution",
      default_behavior=cloudfront.BehaviorOptions(
        origin=origin,
        allowed_methods=cloudfront.AllowedMethods.ALLOW_GET_HEAD_OPTIONS,
        compress=True,
      ),
    )
