"""Glide API version descriptors.

The set of versions is closed: each entry binds a base URL to a header
builder. Supporting a new API generation means adding a descriptor to
VARIANTS, nothing else.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum


class ApiVersion(StrEnum):
    v1 = "v1"
    v2 = "v2"


HeaderBuilder = Callable[[str], dict[str, str]]


@dataclass(frozen=True)
class BackendVariant:
    """One Glide API generation: where it lives and how it authenticates."""

    version: ApiVersion
    base_url: str
    build_headers: HeaderBuilder


def _v1_headers(api_key: str) -> dict[str, str]:
    return {
        "X-API-Key": api_key,
        "Content-Type": "application/json",
    }


def _v2_headers(api_key: str) -> dict[str, str]:
    return {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/json",
    }


VARIANTS: dict[ApiVersion, BackendVariant] = {
    ApiVersion.v1: BackendVariant(
        version=ApiVersion.v1,
        base_url="https://api.glideapp.io",
        build_headers=_v1_headers,
    ),
    ApiVersion.v2: BackendVariant(
        version=ApiVersion.v2,
        base_url="https://api.glideapp.com/api/v2",
        build_headers=_v2_headers,
    ),
}


def get_variant(tag: str) -> BackendVariant:
    """Look up a variant by version tag.

    Raises KeyError if the tag is not a known version.
    """
    for version, variant in VARIANTS.items():
        if version.value == tag:
            return variant
    msg = f"Unknown API version: {tag}"
    raise KeyError(msg)


def available_versions() -> list[str]:
    return [version.value for version in VARIANTS]
