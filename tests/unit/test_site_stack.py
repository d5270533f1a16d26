"""Tests for the StaticSiteStack."""

from pathlib import Path

import pytest
from aws_cdk import App, Environment
from aws_cdk.assertions import Match, Template

from static_website.config import SiteConfig
from static_website.stacks import StaticSiteStack


class TestStaticSiteStack:
  """Test the per-site stack."""

  @pytest.fixture
  def template(self, assets_dir: Path) -> Template:
    """Create a template for a site with owner info."""
    app = App()
    stack = StaticSiteStack(
      app,
      "StaticSite-example-com",
      site_config=SiteConfig(
        domain="example.com",
        assets_path=str(assets_dir),
        owner="Test Owner",
        email="test@example.com",
      ),
      env=Environment(account="123456789012", region="us-east-1"),
    )
    return Template.from_stack(stack)

  def test_outputs(self, template: Template) -> None:
    """Bucket and distribution identifiers are exported."""
    outputs = template.find_outputs("*")

    assert {"BucketName", "DistributionId", "DistributionDomainName"} <= set(outputs)

  def test_bucket_name_output_references_bucket(self, template: Template) -> None:
    """The bucket name output points at the site bucket."""
    bucket_id = next(iter(template.find_resources("AWS::S3::Bucket")))

    template.has_output("BucketName", {"Value": {"Ref": bucket_id}})

  @pytest.mark.parametrize(
    ("key", "value"),
    [
      ("Project", "static-sites"),
      ("Domain", "example.com"),
      ("Owner", "Test Owner"),
      ("OwnerEmail", "test@example.com"),
    ],
  )
  def test_bucket_tags(self, template: Template, key: str, value: str) -> None:
    """Resources carry project and owner tags."""
    template.has_resource_properties(
      "AWS::S3::Bucket",
      {"Tags": Match.array_with([{"Key": key, "Value": value}])},
    )


def test_owner_tags_optional(assets_dir: Path) -> None:
  """Owner tags are skipped when not configured."""
  app = App()
  stack = StaticSiteStack(
    app,
    "StaticSite-example-com",
    site_config=SiteConfig(domain="example.com", assets_path=str(assets_dir)),
    env=Environment(account="123456789012", region="us-east-1"),
  )
  template = Template.from_stack(stack)

  bucket = next(iter(template.find_resources("AWS::S3::Bucket").values()))
  tag_keys = {tag["Key"] for tag in bucket["Properties"]["Tags"]}
  assert "Project" in tag_keys
  assert "Owner" not in tag_keys
  assert "OwnerEmail" not in tag_keys
