"""Configuration loader for static sites."""

from dataclasses import dataclass, field
from pathlib import Path

import yaml


@dataclass(frozen=True)
class SiteConfig:
  """Configuration for a single static site."""

  domain: str
  assets_path: str
  region: str = "us-east-1"
  owner: str | None = None
  email: str | None = None


@dataclass
class Config:
  """Multi-site configuration."""

  sites: list[SiteConfig] = field(default_factory=list)

  @classmethod
  def from_yaml(cls, path: Path | str = "sites.yaml") -> "Config":
    """Load configuration from YAML file.

    Relative ``assets_path`` values are resolved against the directory
    containing the YAML file.
    """
    path = Path(path)
    with open(path) as f:
      data = yaml.safe_load(f) or {}

    defaults = data.get("defaults") or {}
    sites: list[SiteConfig] = []

    for site_data in data.get("sites", []):
      # Merge defaults with site-specific config
      merged = {**defaults, **site_data}

      assets_path = Path(merged["assets_path"])
      if not assets_path.is_absolute():
        assets_path = path.parent / assets_path

      sites.append(
        SiteConfig(
          domain=merged["domain"],
          assets_path=str(assets_path),
          region=merged.get("region", "us-east-1"),
          owner=merged.get("owner"),
          email=merged.get("email"),
        )
      )

    return cls(sites=sites)
