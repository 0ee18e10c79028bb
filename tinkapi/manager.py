"""Controller-manager options and the field indexes kept on resources."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from tinkapi.hardware import Hardware
from tinkapi.workflow import Workflow, WorkflowState

WORKFLOW_WORKER_ADDR_INDEX = ".status.tasks.workerAddr"
WORKFLOW_WORKER_NON_TERMINAL_STATE_INDEX = ".status.state.nonTerminalWorker"
WORKFLOW_STATE_INDEX = ".status.state"
HARDWARE_MAC_ADDR_INDEX = ".spec.interfaces.dhcp.mac"
HARDWARE_IP_ADDR_INDEX = ".spec.interfaces.dhcp.ip"

LEADER_ELECTION_ID = "tink-leader-election"


@dataclass
class Options:
    """Ports the binary listens on."""

    metrics_port: int = 0
    health_probe_port: int = 0


@dataclass
class ManagerOptions:
    """Settings handed to a controller manager."""

    leader_election: bool = False
    leader_election_id: str = ""
    metrics_bind_address: str = ""
    health_probe_bind_address: str = ""
    namespace: str = ""


def get_controller_options(options: Options | None = None) -> ManagerOptions:
    """Options for the Tink controller, with leader election enabled."""
    options = options or Options()
    return ManagerOptions(
        leader_election=True,
        leader_election_id=LEADER_ELECTION_ID,
        metrics_bind_address=f":{options.metrics_port}",
        health_probe_bind_address=f":{options.health_probe_port}",
    )


def get_namespaced_controller_options(namespace: str, options: Options | None = None) -> ManagerOptions:
    """Controller options restricted to one namespace."""
    return dataclasses.replace(get_controller_options(options), namespace=namespace)


def get_server_options(options: Options | None = None) -> ManagerOptions:
    """Options for the Tink API server, with leader election disabled."""
    options = options or Options()
    return ManagerOptions(
        leader_election=False,
        metrics_bind_address=f":{options.metrics_port}",
        health_probe_bind_address=f":{options.health_probe_port}",
    )


def workflow_worker_addr_index(obj: Any) -> list[str] | None:
    """Worker addresses of every task of a workflow."""
    if not isinstance(obj, Workflow):
        return None
    return [task.worker_addr for task in obj.status.tasks if task.worker_addr]


def workflow_worker_non_terminal_state_index(obj: Any) -> list[str] | None:
    """Worker addresses of a workflow that is still pending or running."""
    if not isinstance(obj, Workflow):
        return None
    if obj.status.state not in (WorkflowState.RUNNING, WorkflowState.PENDING):
        return []
    return [task.worker_addr for task in obj.status.tasks if task.worker_addr]


def workflow_state_index(obj: Any) -> list[str] | None:
    """The state of a workflow, as a one-element list."""
    if not isinstance(obj, Workflow):
        return None
    state = obj.status.state
    return [str(state) if state else ""]


def hardware_mac_index(obj: Any) -> list[str] | None:
    """MAC addresses of the DHCP-configured interfaces of a piece of hardware."""
    if not isinstance(obj, Hardware):
        return None
    return [
        iface.dhcp.mac
        for iface in obj.spec.interfaces
        if iface.dhcp is not None and iface.dhcp.mac
    ]


def hardware_ip_index(obj: Any) -> list[str] | None:
    """IP addresses of the DHCP-configured interfaces of a piece of hardware."""
    if not isinstance(obj, Hardware):
        return None
    return [
        iface.dhcp.ip.address
        for iface in obj.spec.interfaces
        if iface.dhcp is not None and iface.dhcp.ip is not None and iface.dhcp.ip.address
    ]


INDEXERS: tuple[tuple[type, str, Callable[[Any], list[str] | None]], ...] = (
    (Workflow, WORKFLOW_WORKER_ADDR_INDEX, workflow_worker_addr_index),
    (Workflow, WORKFLOW_WORKER_NON_TERMINAL_STATE_INDEX, workflow_worker_non_terminal_state_index),
    (Workflow, WORKFLOW_STATE_INDEX, workflow_state_index),
    (Hardware, HARDWARE_IP_ADDR_INDEX, hardware_ip_index),
    (Hardware, HARDWARE_MAC_ADDR_INDEX, hardware_mac_index),
)