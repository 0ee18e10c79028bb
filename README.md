# tinkapi

Data model and helpers for a bare-metal provisioning system built around three
resources: hardware, templates and workflows. It needs nothing outside the
Python standard library.

## Modules

- `tinkapi.meta`: `TypeMeta`, `ObjectMeta` and `ListMeta`, the metadata shared by
  all resources. `TypeMeta.for_kind(kind)` fills in the `tinkerbell.org/v1alpha1`
  API version, and `ObjectMeta.deleted` tells whether a deletion timestamp is set.
- `tinkapi.hardware`: `Hardware`, `HardwareList`, `HardwareSpec`, `HardwareStatus`,
  `HardwareState`. It also holds the network and metadata types, such as `Interface`,
  `DHCP`, `IP`, `Netboot`, `Disk`, `HardwareMetadata` and its `Metadata*` parts.
- `tinkapi.template`: `Template`, `TemplateList`, `TemplateSpec`, `TemplateStatus`,
  `TemplateState`.
- `tinkapi.workflow`: `Workflow`, `WorkflowList`, `WorkflowSpec`, `WorkflowStatus`,
  `Task`, `Action`, `WorkflowState`, and `WorkflowData` with its spec, status and
  list types.
  - `Hardware`, `Template` and `Workflow` each have a `tink_id` property. It reads
    and writes the identifier kept in the resource's annotations, and reads as `""`
    when the identifier is not set.
  - `Workflow.start_time()` returns when the first action of the first task started,
    or `None`.
  - `Workflow.task_info()` returns a `TaskInfo` for the first action that has not
    succeeded. The `TaskInfo` holds the current worker, task, task index, action,
    action index, action state and the total number of actions.
- `tinkapi.manager`:
  - `Options` (metrics and health-probe ports) and `ManagerOptions`.
  - `get_controller_options`, `get_namespaced_controller_options` and
    `get_server_options`. The controller options turn on leader election, with the
    ID `tink-leader-election`; the server options turn it off.
  - The index functions `workflow_worker_addr_index`,
    `workflow_worker_non_terminal_state_index`, `workflow_state_index`,
    `hardware_mac_index` and `hardware_ip_index`. Each returns `None` for an object
    of the wrong kind.
  - `INDEXERS`, which pairs each index function with its resource type and field
    name.
- `tinkapi.reconcile`: `retry_if_error(err)` logs each error, unpacking exception
  groups. It returns a `Result` with `requeue=True` when there was an error, and an
  empty `Result` for `None`.
- `tinkapi.hardware_json`: `marshal_hardware` and `unmarshal_hardware`. A hardware
  record keeps its `metadata` as a JSON string. In the encoded document that field is
  a JSON object, so its quotes are not escaped. Both functions raise `ValueError`
  when that field or the document is not a JSON object.
- `tinkapi.convert_template`: `WorkflowTemplate`, `template_crd_to_proto` and
  `template_proto_to_crd`.
- `tinkapi.convert_workflow`: the wire `State` enum and the messages
  `WorkflowContext`, `WorkflowMessage`, `WorkflowAction` and `WorkflowActionList`.
  The converters are:
  - `workflow_to_workflow_context`.
  - `workflow_crd_to_proto`, which maps an unknown state to pending.
  - `workflow_action_list_crd_to_proto`, which adds the task's volumes and
    environment to each action. The environment is a sorted list of `KEY=value`
    strings.
  - `workflow_proto_to_crd`.

## Example

```python
from tinkapi.manager import hardware_mac_index
from tinkapi.hardware import Hardware, HardwareSpec, Interface, DHCP, IP

hw = Hardware(spec=HardwareSpec(interfaces=[
    Interface(dhcp=DHCP(mac="02:00:00:00:00:01", ip=IP(address="192.0.2.10"))),
]))
print(hardware_mac_index(hw))  # ['02:00:00:00:00:01']
hw.tink_id = "hw-1"
print(hw.tink_id)              # hw-1
```

## What it does not do

This package holds the data model and pure helpers only. It has:

- no controller manager or reconcile loop that watches resources;
- no API server, and no command-line tool;
- no rendering of workflow templates from YAML;
- no storage or cluster client.

`ManagerOptions` and `INDEXERS` describe settings and indexes; nothing in the package
runs them.

## Running the tests

```
pip install -e .[test]
pytest
```