"""Artifact coordinates and resolved dependencies.

A domain dependency is referenced by a ``groupId:artifactId:version``
string.  The surrounding build hands over the dependencies it already
resolved; matching is an exact lookup on the composite key.

INVARIANT: A DomainReference always has exactly three non-empty parts.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from pydantic import AliasChoices, BaseModel, Field

from muleappctl.domain.errors import ConfigurationError

# Placeholder the build configuration uses when no domain is set.
UNSET_PLACEHOLDER = "empty"

# Packaging type a Mule domain is published with.
DOMAIN_TYPE = "zip"

CoordinateKey = tuple[str, str, str]


class DomainReference(BaseModel):
    """Parsed ``groupId:artifactId:version`` triple."""

    model_config = {"frozen": True}

    group_id: str
    artifact_id: str
    version: str

    @property
    def key(self) -> CoordinateKey:
        return (self.group_id, self.artifact_id, self.version)

    def __str__(self) -> str:
        return ":".join(self.key)


class ResolvedDependency(BaseModel):
    """A build artifact whose coordinates and file location are known.

    Accepts both ``group_id`` and the build tool's ``groupId`` spelling.
    ``type`` is the packaging the build resolved; domains are ``zip``.
    """

    model_config = {"frozen": True}

    group_id: str = Field(validation_alias=AliasChoices("group_id", "groupId"))
    artifact_id: str = Field(validation_alias=AliasChoices("artifact_id", "artifactId"))
    version: str
    file: Path
    type: str = DOMAIN_TYPE

    @property
    def key(self) -> CoordinateKey:
        return (self.group_id, self.artifact_id, self.version)


def is_unset(value: str | None) -> bool:
    """True for None, blank strings, and the legacy ``"empty"`` placeholder."""
    return value is None or not value.strip() or value == UNSET_PLACEHOLDER


def parse_domain_reference(value: str | None) -> DomainReference:
    """Parse a colon-delimited domain coordinate.

    Raises:
        ConfigurationError: ``DOMAIN_NOT_CONFIGURED`` when *value* is unset,
            ``DOMAIN_MALFORMED`` when it does not split into three
            non-empty parts.

    Examples:
        >>> str(parse_domain_reference("org.acme:mydomain:1.0"))
        'org.acme:mydomain:1.0'
    """
    if is_unset(value):
        msg = (
            "You must configure the domain_dependency setting and specify the "
            "domain dependency in order to install the domain in the Mule server"
        )
        raise ConfigurationError(msg, code="DOMAIN_NOT_CONFIGURED", stage="domain")

    assert value is not None
    parts = value.split(":")
    if len(parts) != 3 or not all(p.strip() for p in parts):
        msg = (
            f"domain_dependency {value!r} does not declare groupId, artifactId "
            "and version as groupId:artifactId:version"
        )
        raise ConfigurationError(
            msg,
            code="DOMAIN_MALFORMED",
            stage="domain",
            detail={"domain_dependency": value},
        )

    group_id, artifact_id, version = (p.strip() for p in parts)
    return DomainReference(group_id=group_id, artifact_id=artifact_id, version=version)


def index_dependencies(
    dependencies: Iterable[ResolvedDependency],
) -> tuple[dict[CoordinateKey, ResolvedDependency], list[CoordinateKey]]:
    """Index *dependencies* by composite key.

    The first dependency seen for a key wins.  Returns the index and the
    list of keys that appeared more than once.
    """
    index: dict[CoordinateKey, ResolvedDependency] = {}
    duplicates: list[CoordinateKey] = []
    for dep in dependencies:
        if dep.key in index:
            if dep.key not in duplicates:
                duplicates.append(dep.key)
            continue
        index[dep.key] = dep
    return index, duplicates


def parse_dependency_spec(spec: str) -> ResolvedDependency:
    """Parse a ``groupId:artifactId:version=path`` command-line spec.

    Raises:
        ValueError: If the spec lacks ``=`` or its coordinate is malformed.
    """
    coords, sep, path = spec.partition("=")
    if not sep or not path.strip():
        msg = f"Dependency {spec!r} must look like groupId:artifactId:version=PATH"
        raise ValueError(msg)
    parts = coords.split(":")
    if len(parts) != 3 or not all(p.strip() for p in parts):
        msg = f"Dependency {spec!r} must look like groupId:artifactId:version=PATH"
        raise ValueError(msg)
    group_id, artifact_id, version = (p.strip() for p in parts)
    return ResolvedDependency(
        group_id=group_id,
        artifact_id=artifact_id,
        version=version,
        file=Path(path.strip()),
    )
