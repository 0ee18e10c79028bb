"""Workflow resources and the progress information derived from them."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum

from tinkapi.meta import ListMeta, ObjectMeta, TypeMeta, _set_tink_id, _tink_id

WORKFLOW_ID_ANNOTATION = "workflow.tinkerbell.org/id"


class WorkflowState(StrEnum):
    """State of a workflow or of one of its actions."""

    PENDING = "STATE_PENDING"
    RUNNING = "STATE_RUNNING"
    FAILED = "STATE_FAILED"
    TIMEOUT = "STATE_TIMEOUT"
    SUCCESS = "STATE_SUCCESS"


_UNFINISHED = frozenset(
    {WorkflowState.PENDING, WorkflowState.RUNNING, WorkflowState.FAILED, WorkflowState.TIMEOUT}
)


@dataclass
class WorkflowSpec:
    template_ref: str = ""
    hardware_map: dict[str, str] = field(default_factory=dict)


@dataclass
class Action:
    name: str = ""
    image: str = ""
    timeout: int = 0
    command: list[str] = field(default_factory=list)
    volumes: list[str] = field(default_factory=list)
    pid: str = ""
    environment: dict[str, str] = field(default_factory=dict)
    status: WorkflowState | None = None
    started_at: datetime | None = None
    seconds: int = 0
    message: str = ""


@dataclass
class Task:
    """A series of actions completed by one worker."""

    name: str = ""
    worker_addr: str = ""
    actions: list[Action] = field(default_factory=list)
    volumes: list[str] = field(default_factory=list)
    environment: dict[str, str] = field(default_factory=dict)


@dataclass
class WorkflowStatus:
    state: WorkflowState | None = None
    global_timeout: int = 0
    tasks: list[Task] = field(default_factory=list)


@dataclass(frozen=True)
class TaskInfo:
    """Where a workflow currently stands."""

    current_worker: str = ""
    current_task: str = ""
    current_task_index: int = 0
    current_action: str = ""
    current_action_index: int = 0
    current_action_state: WorkflowState | None = None
    total_number_of_actions: int = 0


@dataclass
class Workflow:
    """A workflow run against a set of hardware."""

    type_meta: TypeMeta = field(default_factory=TypeMeta)
    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: WorkflowSpec = field(default_factory=WorkflowSpec)
    status: WorkflowStatus = field(default_factory=WorkflowStatus)

    @property
    def tink_id(self) -> str:
        """The Tinkerbell ID stored in the workflow's annotations."""
        return _tink_id(self.metadata, WORKFLOW_ID_ANNOTATION)

    @tink_id.setter
    def tink_id(self, value: str) -> None:
        _set_tink_id(self.metadata, WORKFLOW_ID_ANNOTATION, value)

    def start_time(self) -> datetime | None:
        """Start time of the first action of the first task, if any."""
        tasks = self.status.tasks
        if tasks and tasks[0].actions:
            return tasks[0].actions[0].started_at
        return None

    def task_info(self) -> TaskInfo:
        """Locate the first action that has not succeeded."""
        found: tuple[Task, Action, int] | None = None
        action_index = 0
        total = 0
        for task_index, task in enumerate(self.status.tasks):
            total += len(task.actions)
            if found is not None:
                continue
            for action in task.actions:
                if action.status == WorkflowState.SUCCESS:
                    action_index += 1
                elif action.status in _UNFINISHED:
                    found = (task, action, task_index)
                    break

        if found is None:
            return TaskInfo(current_action_index=action_index, total_number_of_actions=total)
        task, action, task_index = found
        return TaskInfo(
            current_worker=task.worker_addr,
            current_task=task.name,
            current_task_index=task_index,
            current_action=action.name,
            current_action_index=action_index,
            current_action_state=action.status,
            total_number_of_actions=total,
        )


@dataclass
class WorkflowList:
    type_meta: TypeMeta = field(default_factory=TypeMeta)
    metadata: ListMeta = field(default_factory=ListMeta)
    items: list[Workflow] = field(default_factory=list)


@dataclass
class WorkflowDataSpec:
    workflow_ref: str = ""


@dataclass
class WorkflowDataStatus:
    data: str = ""
    metadata: str = ""


@dataclass
class WorkflowData:
    """Data attached to a workflow."""

    type_meta: TypeMeta = field(default_factory=TypeMeta)
    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: WorkflowSpec = field(default_factory=WorkflowSpec)
    status: WorkflowStatus = field(default_factory=WorkflowStatus)


@dataclass
class WorkflowDataList:
    type_meta: TypeMeta = field(default_factory=TypeMeta)
    metadata: ListMeta = field(default_factory=ListMeta)
    items: list[WorkflowData] = field(default_factory=list)