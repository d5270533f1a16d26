"""Private S3 bucket holding the site content."""

from aws_cdk import RemovalPolicy
from aws_cdk import aws_s3 as s3
from constructs import Construct


def site_bucket_name(domain: str, account: str, region: str) -> str:
  """Bucket name unique per account and region.

  The domain is interpolated as-is, without validation.
  """
  return f"{domain}-{account}-{region}"


class StorageBucket(Construct):
  """S3 bucket reachable only through CloudFront.

  Deleted together with the stack, contents included.
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    bucket_name: str,
  ) -> None:
    super().__init__(scope, id)

    self.bucket = s3.Bucket(
      self,
      "Bucket",
      bucket_name=bucket_name,
      website_index_document="index.html",
      website_error_document="error.html",
      public_read_access=False,
      block_public_access=s3.BlockPublicAccess.BLOCK_ALL,
      removal_policy=RemovalPolicy.DESTROY,
      auto_delete_objects=True,
    )
