"""Conversion between Workflow resources and their wire representation."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum

from tinkapi.meta import ObjectMeta, TypeMeta
from tinkapi.workflow import WORKFLOW_ID_ANNOTATION, Workflow, WorkflowState


class State(IntEnum):
    """Workflow and action state as numbered on the wire."""

    STATE_PENDING = 0
    STATE_RUNNING = 1
    STATE_FAILED = 2
    STATE_TIMEOUT = 3
    STATE_SUCCESS = 4


@dataclass
class WorkflowContext:
    """Progress of a workflow as reported to workers."""

    workflow_id: str = ""
    current_worker: str = ""
    current_task: str = ""
    current_action: str = ""
    current_action_index: int = 0
    current_action_state: State = State.STATE_PENDING
    total_number_of_actions: int = 0


@dataclass
class WorkflowMessage:
    """A workflow as exchanged with Tinkerbell clients."""

    id: str = ""
    template: str = ""
    state: State = State.STATE_PENDING
    created_at: datetime | None = None
    deleted_at: datetime | None = None


@dataclass
class WorkflowAction:
    """One action to be run by a worker, with task settings merged in."""

    task_name: str = ""
    name: str = ""
    image: str = ""
    timeout: int = 0
    command: list[str] = field(default_factory=list)
    worker_id: str = ""
    volumes: list[str] = field(default_factory=list)
    environment: list[str] = field(default_factory=list)
    pid: str = ""


@dataclass
class WorkflowActionList:
    action_list: list[WorkflowAction] = field(default_factory=list)


def _to_wire_state(state: WorkflowState | str | None) -> State:
    return State.__members__.get(str(state) if state else "", State.STATE_PENDING)


def workflow_to_workflow_context(workflow: Workflow | None) -> WorkflowContext | None:
    """Summarise where a workflow currently stands."""
    if workflow is None:
        return None
    info = workflow.task_info()
    return WorkflowContext(
        workflow_id=workflow.metadata.name,
        current_worker=info.current_worker,
        current_task=info.current_task,
        current_action=info.current_action,
        current_action_index=info.current_action_index,
        current_action_state=_to_wire_state(info.current_action_state),
        total_number_of_actions=info.total_number_of_actions,
    )


def workflow_crd_to_proto(workflow: Workflow | None) -> WorkflowMessage | None:
    """Convert a Workflow resource; unknown states become pending."""
    if workflow is None:
        return None
    return WorkflowMessage(
        id=workflow.tink_id,
        template=workflow.spec.template_ref,
        state=_to_wire_state(workflow.status.state),
        created_at=workflow.metadata.creation_timestamp,
        deleted_at=workflow.metadata.deletion_timestamp,
    )


def workflow_action_list_crd_to_proto(workflow: Workflow | None) -> WorkflowActionList | None:
    """List every action of a workflow with its task's volumes and environment merged in."""
    if workflow is None:
        return None
    actions = []
    for task in workflow.status.tasks:
        for action in task.actions:
            merged = {**task.environment, **action.environment}
            actions.append(
                WorkflowAction(
                    task_name=task.name,
                    name=action.name,
                    image=action.image,
                    timeout=action.timeout,
                    command=list(action.command),
                    worker_id=task.worker_addr,
                    volumes=[*task.volumes, *action.volumes],
                    environment=sorted(f"{key}={value}" for key, value in merged.items()),
                    pid=action.pid,
                )
            )
    return WorkflowActionList(action_list=actions)


def workflow_proto_to_crd(workflow: WorkflowMessage | None) -> Workflow | None:
    """Convert a wire workflow to a Workflow resource."""
    if workflow is None:
        return None
    result = Workflow(
        type_meta=TypeMeta.for_kind("Workflow"),
        metadata=ObjectMeta(
            annotations={WORKFLOW_ID_ANNOTATION: workflow.id},
            creation_timestamp=workflow.created_at,
        ),
    )
    try:
        state = State(workflow.state)
    except ValueError:
        return result
    result.status.state = WorkflowState(state.name)
    return result