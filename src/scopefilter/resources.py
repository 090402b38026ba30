"""Group-resource identifiers and the resolver protocol used to canonicalize them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class GroupResource:
    """
    A resource kind independent of API version, e.g. `deployments.apps`.
    The core group is the empty string.
    """

    group: str
    resource: str

    @classmethod
    def parse(cls, value: str) -> GroupResource:
        """
        Split `resource.group` at the first dot. A value without a dot is a
        resource in the core group.
        """
        resource, sep, group = value.partition(".")
        if not sep:
            return cls(group="", resource=value)
        return cls(group=group, resource=resource)

    def with_version(self, version: str) -> GroupVersionResource:
        return GroupVersionResource(group=self.group, version=version, resource=self.resource)

    def __str__(self) -> str:
        if not self.group:
            return self.resource
        return f"{self.resource}.{self.group}"


@dataclass(frozen=True)
class GroupVersionResource:
    group: str
    version: str
    resource: str

    def group_resource(self) -> GroupResource:
        return GroupResource(group=self.group, resource=self.resource)


class ResourceResolver(Protocol):
    """
    Resolves possibly-abbreviated resource identifiers (short names, singular
    forms, missing group) to fully-qualified ones. An empty version means "any
    version".
    """

    def resource_for(self, resource: GroupVersionResource) -> GroupVersionResource:
        """Return the resolved resource or raise `ResourceNotFoundError`."""
        ...
