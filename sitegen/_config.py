"""Site settings - configured through environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_TITLE = "bareware.dev"
DEFAULT_SUBTITLE = "Engineering without abstraction layers between you and the machine!"
DEFAULT_EXTENSION = ".txt"


@dataclass(slots=True, frozen=True)
class SiteConfig:
    title: str
    subtitle: str
    extension: str


def get_config() -> SiteConfig:
    return SiteConfig(
        title     = os.getenv("SITEGEN_TITLE",     DEFAULT_TITLE),
        subtitle  = os.getenv("SITEGEN_SUBTITLE",  DEFAULT_SUBTITLE),
        extension = os.getenv("SITEGEN_EXTENSION", DEFAULT_EXTENSION),
    )
