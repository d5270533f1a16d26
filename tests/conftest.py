"""Pytest fixtures for CDK construct tests."""

from pathlib import Path

import aws_cdk as cdk
import pytest

from static_website.config import SiteConfig


@pytest.fixture
def app() -> cdk.App:
  """Create a CDK App for testing."""
  return cdk.App()


@pytest.fixture
def stack(app: cdk.App) -> cdk.Stack:
  """Create a CDK Stack for testing."""
  return cdk.Stack(
    app,
    "TestStack",
    env=cdk.Environment(account="123456789012", region="us-east-1"),
  )


@pytest.fixture
def assets_dir(tmp_path: Path) -> Path:
  """Create a minimal site asset tree."""
  site = tmp_path / "site"
  site.mkdir()
  (site / "index.html").write_text("<h1>Hello</h1>")
  (site / "error.html").write_text("<h1>Not found</h1>")
  return site


@pytest.fixture
def site_config(assets_dir: Path) -> SiteConfig:
  """Site configuration pointing at the test assets."""
  return SiteConfig(domain="example.com", assets_path=str(assets_dir))
