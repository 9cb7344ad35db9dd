"""Deprecation database rows and classification findings."""

import re
from enum import IntEnum
from typing import Optional, Tuple

from pydantic import BaseModel, Field

VERSION_PATTERN = re.compile(r"v?(\d+)\.(\d+)(?:\.(\d+))?")


def parse_version(version_string: str) -> Optional[Tuple[int, int, int]]:
    """Parse a version string such as ``v1.23.0`` into a (major, minor, patch) tuple."""
    if not version_string:
        return None
    match = VERSION_PATTERN.fullmatch(version_string.strip())
    if match:
        return int(match.group(1)), int(match.group(2)), int(match.group(3) or 0)
    return None


def _reached(threshold: str, target: str) -> bool:
    """True when ``target`` is at or past ``threshold``; blank thresholds never are."""
    threshold_version = parse_version(threshold)
    target_version = parse_version(target)
    if threshold_version is None or target_version is None:
        return False
    return target_version >= threshold_version


class Severity(IntEnum):
    """Overall severity of a set of findings; higher is worse."""

    CLEAN = 0
    DEPRECATED = 2
    REMOVED = 3
    REPLACEMENT_UNAVAILABLE = 4


class DeprecatedVersion(BaseModel):
    """One known deprecated apiVersion/kind pair."""

    version: str
    kind: str
    deprecated_in: str = Field(default="", alias="deprecated-in")
    removed_in: str = Field(default="", alias="removed-in")
    replacement_api: str = Field(default="", alias="replacement-api")
    replacement_available_in: str = Field(default="", alias="replacement-available-in")
    component: str = "k8s"

    class Config:
        populate_by_name = True
        frozen = True

    @property
    def key(self) -> Tuple[str, str]:
        return self.version, self.kind

    def is_deprecated_in(self, target: str) -> bool:
        return _reached(self.deprecated_in, target)

    def is_removed_in(self, target: str) -> bool:
        return _reached(self.removed_in, target)

    def is_replacement_available_in(self, target: str) -> bool:
        """Whether the replacement API can be used at ``target``."""
        if not self.replacement_api:
            return False
        if not self.replacement_available_in:
            return True
        return _reached(self.replacement_available_in, target)


class Finding(BaseModel):
    """A resource in a rendered manifest that uses a known deprecated API."""

    name: str
    namespace: Optional[str] = None
    kind: str
    api_version: str
    deprecated: bool = False
    removed: bool = False
    replacement_api: str = ""
    replacement_available: bool = False
    deprecated_in: str = ""
    removed_in: str = ""
    component: str = "k8s"

    @property
    def severity(self) -> Severity:
        flagged = self.deprecated or self.removed
        if flagged and self.replacement_api and not self.replacement_available:
            return Severity.REPLACEMENT_UNAVAILABLE
        if self.removed:
            return Severity.REMOVED
        if self.deprecated:
            return Severity.DEPRECATED
        return Severity.CLEAN
