"""Template resources: workflow templates stored as YAML text."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from tinkapi.meta import ListMeta, ObjectMeta, TypeMeta, _set_tink_id, _tink_id

TEMPLATE_ID_ANNOTATION = "template.tinkerbell.org/id"


class TemplateState(StrEnum):
    """Observed state of a template."""

    ERROR = "Error"
    READY = "Ready"


@dataclass
class TemplateSpec:
    data: str | None = None


@dataclass
class TemplateStatus:
    state: TemplateState | None = None


@dataclass
class Template:
    """A workflow template."""

    type_meta: TypeMeta = field(default_factory=TypeMeta)
    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: TemplateSpec = field(default_factory=TemplateSpec)
    status: TemplateStatus = field(default_factory=TemplateStatus)

    @property
    def tink_id(self) -> str:
        """The Tinkerbell ID stored in the template's annotations."""
        return _tink_id(self.metadata, TEMPLATE_ID_ANNOTATION)

    @tink_id.setter
    def tink_id(self, value: str) -> None:
        _set_tink_id(self.metadata, TEMPLATE_ID_ANNOTATION, value)


@dataclass
class TemplateList:
    type_meta: TypeMeta = field(default_factory=TypeMeta)
    metadata: ListMeta = field(default_factory=ListMeta)
    items: list[Template] = field(default_factory=list)