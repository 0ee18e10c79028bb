"""Object metadata shared by every resource of the tinkerbell.org/v1alpha1 API group."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

GROUP = "tinkerbell.org"
VERSION = "v1alpha1"
GROUP_VERSION = f"{GROUP}/{VERSION}"


@dataclass
class TypeMeta:
    """Kind and API version of a resource."""

    kind: str = ""
    api_version: str = ""

    @classmethod
    def for_kind(cls, kind: str) -> TypeMeta:
        """Type information for a kind of this API group."""
        return cls(kind=kind, api_version=GROUP_VERSION)


@dataclass
class ObjectMeta:
    """Identity, annotations and lifecycle timestamps of a single resource."""

    name: str = ""
    namespace: str = ""
    annotations: dict[str, str] = field(default_factory=dict)
    resource_version: str = ""
    creation_timestamp: datetime | None = None
    deletion_timestamp: datetime | None = None

    @property
    def deleted(self) -> bool:
        """True once the resource has been marked for deletion."""
        return self.deletion_timestamp is not None


@dataclass
class ListMeta:
    """Metadata of a list of resources."""

    resource_version: str = ""
    continue_token: str = ""
    remaining_item_count: int | None = None


def _tink_id(meta: ObjectMeta, annotation: str) -> str:
    return meta.annotations.get(annotation, "")


def _set_tink_id(meta: ObjectMeta, annotation: str, value: str) -> None:
    if meta.annotations is None:
        meta.annotations = {}
    meta.annotations[annotation] = value