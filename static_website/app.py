#!/usr/bin/env python3
"""CDK application entry point for static website infrastructure."""

import os
import sys
from pathlib import Path

# Add the project root to the Python path
sys.path.insert(0, str(Path(__file__).parent.parent))

import aws_cdk as cdk
import boto3

from static_website.config import Config
from static_website.stacks.site_stack import StaticSiteStack


def get_account_id() -> str:
  """Get AWS account ID, preferring the one the CDK CLI resolved."""
  account_id = os.environ.get("CDK_DEFAULT_ACCOUNT")
  if account_id:
    return account_id

  sts = boto3.client("sts")
  return str(sts.get_caller_identity()["Account"])


def stack_name_for(domain: str) -> str:
  """Stack name for a site, with dots replaced by dashes."""
  return f"StaticSite-{domain.replace('.', '-')}"


def main() -> None:
  """Create CDK app with a stack for each configured site."""
  app = cdk.App()

  # Load configuration
  config_path = app.node.try_get_context("config") or "sites.yaml"
  config = Config.from_yaml(Path(config_path))

  account_id = get_account_id()

  for site in config.sites:
    StaticSiteStack(
      app,
      stack_name_for(site.domain),
      site_config=site,
      env=cdk.Environment(
        account=account_id,
        region=site.region,
      ),
      description=f"Static website infrastructure for {site.domain}",
    )

  app.synth()


if __name__ == "__main__":
  main()
