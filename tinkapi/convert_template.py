"""Conversion between Template resources and their wire representation."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from tinkapi.meta import ObjectMeta, TypeMeta
from tinkapi.template import TEMPLATE_ID_ANNOTATION, Template, TemplateSpec


@dataclass
class WorkflowTemplate:
    """A workflow template as exchanged with Tinkerbell clients."""

    id: str = ""
    name: str = ""
    created_at: datetime | None = None
    deleted_at: datetime | None = None
    data: str = ""


def template_crd_to_proto(template: Template | None) -> WorkflowTemplate | None:
    """Convert a Template resource to a WorkflowTemplate."""
    if template is None:
        return None
    return WorkflowTemplate(
        id=template.tink_id,
        name=template.metadata.name,
        created_at=template.metadata.creation_timestamp,
        deleted_at=template.metadata.deletion_timestamp,
        data=template.spec.data if template.spec.data is not None else "",
    )


def template_proto_to_crd(template: WorkflowTemplate | None) -> Template | None:
    """Convert a WorkflowTemplate to a Template resource."""
    if template is None:
        return None
    return Template(
        type_meta=TypeMeta.for_kind("Template"),
        metadata=ObjectMeta(
            name=template.name,
            annotations={TEMPLATE_ID_ANNOTATION: template.id},
            creation_timestamp=template.created_at,
            deletion_timestamp=template.deleted_at,
        ),
        spec=TemplateSpec(data=template.data),
    )