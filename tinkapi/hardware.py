"""Hardware resources: machines that Tinkerbell can provision."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from tinkapi.meta import ListMeta, ObjectMeta, TypeMeta, _set_tink_id, _tink_id

HARDWARE_ID_ANNOTATION = "hardware.tinkerbell.org/id"


class HardwareState(StrEnum):
    """Observed state of a piece of hardware."""

    ERROR = "Error"
    READY = "Ready"


@dataclass
class IPXE:
    url: str = ""
    contents: str = ""


@dataclass
class OSIE:
    base_url: str = ""
    kernel: str = ""
    initrd: str = ""


@dataclass
class Netboot:
    allow_pxe: bool | None = None
    allow_workflow: bool | None = None
    ipxe: IPXE | None = None
    osie: OSIE | None = None


@dataclass
class IP:
    address: str = ""
    netmask: str = ""
    gateway: str = ""
    family: int = 0


@dataclass
class DHCP:
    mac: str = ""
    hostname: str = ""
    lease_time: int = 0
    name_servers: list[str] = field(default_factory=list)
    time_servers: list[str] = field(default_factory=list)
    arch: str = ""
    uefi: bool = False
    iface_name: str = ""
    ip: IP | None = None


@dataclass
class Interface:
    """A network interface configuration."""

    netboot: Netboot | None = None
    dhcp: DHCP | None = None


@dataclass
class Disk:
    device: str = ""


@dataclass
class MetadataManufacturer:
    id: str = ""
    slug: str = ""


@dataclass
class MetadataInstanceOperatingSystem:
    slug: str = ""
    distro: str = ""
    version: str = ""
    image_tag: str = ""
    os_slug: str = ""


@dataclass
class MetadataInstanceIP:
    address: str = ""
    netmask: str = ""
    gateway: str = ""
    family: int = 0
    public: bool = False
    management: bool = False


@dataclass
class MetadataInstanceStorageDiskPartition:
    label: str = ""
    number: int = 0
    size: int = 0
    start: int = 0
    type_guid: str = ""


@dataclass
class MetadataInstanceStorageDisk:
    device: str = ""
    wipe_table: bool = False
    partitions: list[MetadataInstanceStorageDiskPartition] = field(default_factory=list)


@dataclass
class MetadataInstanceStorageRAID:
    name: str = ""
    level: str = ""
    devices: list[str] = field(default_factory=list)
    spare: int = 0


@dataclass
class MetadataInstanceStorageFile:
    path: str = ""
    contents: str = ""
    mode: int = 0
    uid: int = 0
    gid: int = 0


@dataclass
class MetadataInstanceStorageMountFilesystemOptions:
    force: bool = False
    options: list[str] = field(default_factory=list)


@dataclass
class MetadataInstanceStorageMount:
    device: str = ""
    format: str = ""
    files: list[MetadataInstanceStorageFile] = field(default_factory=list)
    create: MetadataInstanceStorageMountFilesystemOptions | None = None
    point: str = ""


@dataclass
class MetadataInstanceStorageFilesystem:
    mount: MetadataInstanceStorageMount | None = None


@dataclass
class MetadataInstanceStorage:
    disks: list[MetadataInstanceStorageDisk] = field(default_factory=list)
    raid: list[MetadataInstanceStorageRAID] = field(default_factory=list)
    filesystems: list[MetadataInstanceStorageFilesystem] = field(default_factory=list)


@dataclass
class MetadataInstance:
    id: str = ""
    state: str = ""
    hostname: str = ""
    allow_pxe: bool = False
    rescue: bool = False
    operating_system: MetadataInstanceOperatingSystem | None = None
    always_pxe: bool = False
    ipxe_script_url: str = ""
    ips: list[MetadataInstanceIP] = field(default_factory=list)
    userdata: str = ""
    crypted_root_password: str = ""
    tags: list[str] = field(default_factory=list)
    storage: MetadataInstanceStorage | None = None
    ssh_keys: list[str] = field(default_factory=list)
    network_ready: bool = False


@dataclass
class MetadataCustom:
    preinstalled_operating_system_version: MetadataInstanceOperatingSystem | None = None
    private_subnets: list[str] = field(default_factory=list)


@dataclass
class MetadataFacility:
    plan_slug: str = ""
    plan_version_slug: str = ""
    facility_code: str = ""


@dataclass
class HardwareMetadata:
    state: str = ""
    bonding_mode: int = 0
    manufacturer: MetadataManufacturer | None = None
    instance: MetadataInstance | None = None
    custom: MetadataCustom | None = None
    facility: MetadataFacility | None = None


@dataclass
class HardwareSpec:
    """Desired state of a piece of hardware."""

    bmc_ref: dict[str, str] | None = None
    interfaces: list[Interface] = field(default_factory=list)
    metadata: HardwareMetadata | None = None
    tink_version: int = 0
    disks: list[Disk] = field(default_factory=list)
    resources: dict[str, str] = field(default_factory=dict)
    user_data: str | None = None


@dataclass
class HardwareStatus:
    state: HardwareState | None = None


@dataclass
class Hardware:
    """A machine known to Tinkerbell."""

    type_meta: TypeMeta = field(default_factory=TypeMeta)
    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: HardwareSpec = field(default_factory=HardwareSpec)
    status: HardwareStatus = field(default_factory=HardwareStatus)

    @property
    def tink_id(self) -> str:
        """The Tinkerbell ID stored in the hardware's annotations."""
        return _tink_id(self.metadata, HARDWARE_ID_ANNOTATION)

    @tink_id.setter
    def tink_id(self, value: str) -> None:
        _set_tink_id(self.metadata, HARDWARE_ID_ANNOTATION, value)


@dataclass
class HardwareList:
    type_meta: TypeMeta = field(default_factory=TypeMeta)
    metadata: ListMeta = field(default_factory=ListMeta)
    items: list[Hardware] = field(default_factory=list)