"""Semantic version numbers: parsing, validation and formatting."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

_SEMVER = re.compile(
    r"(\d+)\.(\d+)\.(\d+)(?:-([0-9A-Za-z\-.]+))?(?:\+([0-9A-Za-z\-.]+))?",
    re.ASCII,
)


def validate_semver(version: str) -> bool:
    """Return True if the text is a well-formed semantic version."""
    return _SEMVER.fullmatch(version) is not None


@dataclass
class SemVer:
    """A semantic version with optional pre-release and build metadata."""

    major: int
    minor: int
    patch: int
    pre_release: Optional[str] = None
    build_metadata: Optional[str] = None

    def __str__(self) -> str:
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.pre_release is not None:
            text += f"-{self.pre_release}"
        if self.build_metadata is not None:
            text += f"+{self.build_metadata}"
        return text

    @classmethod
    def parse(cls, version: str) -> Optional["SemVer"]:
        """Parse a version string, returning None if it is not valid."""
        match = _SEMVER.fullmatch(version)
        if match is None:
            return None
        major, minor, patch, pre_release, build_metadata = match.groups()
        return cls(int(major), int(minor), int(patch), pre_release, build_metadata)