"""Origin Access Identity and the bucket grant that goes with it."""

from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_iam as iam
from aws_cdk import aws_s3 as s3
from constructs import Construct


class CloudFrontAccess(Construct):
  """Lets CloudFront, and only CloudFront, read objects from the bucket."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    bucket: s3.IBucket,
  ) -> None:
    super().__init__(scope, id)

    self.identity = cloudfront.OriginAccessIdentity(self, "Identity")

    self.statement = iam.PolicyStatement(
      actions=["s3:GetObject"],
      resources=[bucket.arn_for_objects("*")],
      principals=[
        iam.CanonicalUserPrincipal(
          self.identity.cloud_front_origin_access_identity_s3_canonical_user_id
        )
      ],
    )
    bucket.add_to_resource_policy(self.statement)
