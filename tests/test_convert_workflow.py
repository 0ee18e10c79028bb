from datetime import datetime, timezone

import pytest

from tinkapi.convert_workflow import (
    State,
    WorkflowAction,
    WorkflowActionList,
    WorkflowContext,
    WorkflowMessage,
    workflow_action_list_crd_to_proto,
    workflow_crd_to_proto,
    workflow_proto_to_crd,
    workflow_to_workflow_context,
)
from tinkapi.meta import ObjectMeta, TypeMeta
from tinkapi.workflow import Action, Task, Workflow, WorkflowSpec, WorkflowState, WorkflowStatus

NOW = datetime.fromtimestamp(1637361794, tz=timezone.utc)
WORKFLOW_ID = "7d9031ee-18d4-4ba4-b934-c3a78a1330f6"
ANNOTATION = "workflow.tinkerbell.org/id"
TYPE_META = TypeMeta(kind="Workflow", api_version="tinkerbell.org/v1alpha1")
WORKER_MAC = "02:00:00:00:00:f4"


@pytest.mark.parametrize(
    ("given", "want"),
    [
        pytest.param(None, None, id="nil workflow"),
        pytest.param(
            Workflow(),
            WorkflowContext(current_action_state=State.STATE_PENDING),
            id="empty workflow",
        ),
        pytest.param(
            Workflow(
                metadata=ObjectMeta(name="wf1", namespace="default"),
                status=WorkflowStatus(
                    state=WorkflowState.RUNNING,
                    global_timeout=600,
                    tasks=[
                        Task(
                            name="task1",
                            worker_addr="worker1",
                            actions=[
                                Action(name="action1", status=WorkflowState.SUCCESS),
                                Action(name="action2", status=WorkflowState.RUNNING),
                            ],
                        )
                    ],
                ),
            ),
            WorkflowContext(
                workflow_id="wf1",
                current_worker="worker1",
                current_task="task1",
                current_action="action2",
                current_action_index=1,
                current_action_state=State.STATE_RUNNING,
                total_number_of_actions=2,
            ),
            id="running workflow",
        ),
    ],
)
def test_workflow_to_workflow_context(given, want):
    assert workflow_to_workflow_context(given) == want


@pytest.mark.parametrize(
    ("given", "want"),
    [
        pytest.param(None, None, id="nil arg"),
        pytest.param(
            Workflow(type_meta=TYPE_META, metadata=ObjectMeta(name="wf1", creation_timestamp=NOW)),
            WorkflowMessage(id="", template="", state=State.STATE_PENDING, created_at=NOW),
            id="empty workflow",
        ),
        pytest.param(
            Workflow(
                type_meta=TYPE_META,
                metadata=ObjectMeta(name="wf1", annotations={ANNOTATION: WORKFLOW_ID}, creation_timestamp=NOW),
                spec=WorkflowSpec(template_ref="MyCoolWorkflow"),
                status=WorkflowStatus(state=WorkflowState.SUCCESS),
            ),
            WorkflowMessage(id=WORKFLOW_ID, template="MyCoolWorkflow", state=State.STATE_SUCCESS, created_at=NOW),
            id="full workflow",
        ),
    ],
)
def test_workflow_crd_to_proto(given, want):
    assert workflow_crd_to_proto(given) == want


def _full_workflow():
    return Workflow(
        type_meta=TYPE_META,
        metadata=ObjectMeta(name="wf1", annotations={ANNOTATION: WORKFLOW_ID}, creation_timestamp=NOW),
        spec=WorkflowSpec(template_ref="MyCoolWorkflow"),
        status=WorkflowStatus(
            state=WorkflowState.SUCCESS,
            tasks=[
                Task(
                    name="worker1",
                    worker_addr=WORKER_MAC,
                    actions=[
                        Action(
                            name="stream-debian-image",
                            timeout=600,
                            image="quay.io/tinkerbell-actions/image2disk:v1.0.0",
                            environment={
                                "DEST_DISK": "/dev/nvme0n1",
                                "IMG_URL": "http://10.1.1.11:8080/debian-10-openstack-amd64.raw.gz",
                                "COMPRESSED": "true",
                                "GODEBUG": "",
                            },
                            volumes=["/tmp/debug:/tmp/debug"],
                        ),
                        Action(
                            name="kexec",
                            image="quay.io/tinkerbell-actions/kexec:v1.0.1",
                            timeout=90,
                            pid="host",
                            environment={"FS_TYPE": "ext4", "BLOCK_DEVICE": "/dev/nvme0n1p1"},
                        ),
                    ],
                    volumes=["/dev:/dev", "/dev/console:/dev/console", "/lib/firmware:/lib/firmware:ro"],
                    environment={"GODEBUG": "http2debug=1", "GOGC": "100"},
                )
            ],
        ),
    )


@pytest.mark.parametrize(
    ("given", "want"),
    [
        pytest.param(None, None, id="nil arg"),
        pytest.param(
            Workflow(type_meta=TYPE_META, metadata=ObjectMeta(name="wf1", creation_timestamp=NOW)),
            WorkflowActionList(action_list=[]),
            id="empty workflow",
        ),
        pytest.param(
            _full_workflow(),
            WorkflowActionList(
                action_list=[
                    WorkflowAction(
                        task_name="worker1",
                        name="stream-debian-image",
                        image="quay.io/tinkerbell-actions/image2disk:v1.0.0",
                        timeout=600,
                        worker_id=WORKER_MAC,
                        environment=[
                            "COMPRESSED=true",
                            "DEST_DISK=/dev/nvme0n1",
                            "GODEBUG=",
                            "GOGC=100",
                            "IMG_URL=http://10.1.1.11:8080/debian-10-openstack-amd64.raw.gz",
                        ],
                        volumes=[
                            "/dev:/dev",
                            "/dev/console:/dev/console",
                            "/lib/firmware:/lib/firmware:ro",
                            "/tmp/debug:/tmp/debug",
                        ],
                    ),
                    WorkflowAction(
                        task_name="worker1",
                        name="kexec",
                        image="quay.io/tinkerbell-actions/kexec:v1.0.1",
                        timeout=90,
                        worker_id=WORKER_MAC,
                        environment=[
                            "BLOCK_DEVICE=/dev/nvme0n1p1",
                            "FS_TYPE=ext4",
                            "GODEBUG=http2debug=1",
                            "GOGC=100",
                        ],
                        pid="host",
                        volumes=["/dev:/dev", "/dev/console:/dev/console", "/lib/firmware:/lib/firmware:ro"],
                    ),
                ]
            ),
            id="full workflow",
        ),
    ],
)
def test_workflow_action_list_crd_to_proto(given, want):
    assert workflow_action_list_crd_to_proto(given) == want


def test_action_list_does_not_alter_task_volumes():
    workflow = _full_workflow()
    workflow_action_list_crd_to_proto(workflow)
    assert workflow.status.tasks[0].volumes == [
        "/dev:/dev",
        "/dev/console:/dev/console",
        "/lib/firmware:/lib/firmware:ro",
    ]


@pytest.mark.parametrize(
    ("given", "want"),
    [
        pytest.param(None, None, id="nil arg"),
        pytest.param(
            WorkflowMessage(id="", template="", created_at=NOW),
            Workflow(
                type_meta=TYPE_META,
                metadata=ObjectMeta(annotations={ANNOTATION: ""}, creation_timestamp=NOW),
                spec=WorkflowSpec(),
                status=WorkflowStatus(state=WorkflowState.PENDING),
            ),
            id="empty workflow",
        ),
        pytest.param(
            WorkflowMessage(id=WORKFLOW_ID, template="MyCoolWorkflow", state=State.STATE_SUCCESS, created_at=NOW),
            Workflow(
                type_meta=TYPE_META,
                metadata=ObjectMeta(annotations={ANNOTATION: WORKFLOW_ID}, creation_timestamp=NOW),
                spec=WorkflowSpec(),
                status=WorkflowStatus(state=WorkflowState.SUCCESS),
            ),
            id="full workflow",
        ),
    ],
)
def test_workflow_proto_to_crd(given, want):
    assert workflow_proto_to_crd(given) == want


def test_proto_to_crd_leaves_unknown_state_unset():
    result = workflow_proto_to_crd(WorkflowMessage(id="x", state=99, created_at=NOW))
    assert result.status.state is None
    assert result.tink_id == "x"