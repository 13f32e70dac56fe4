from .m_stream import Stream
from .m_stream_setting import (
    StreamSetting,
    EthernetConfig,
    VlanConfig,
    LabelStackEntry,
    IPv4Config,
    IPv6Config,
    VxlanConfig,
)
from .m_encapsulation import (
    EncapsulationHeader,
    NoEncapsulation,
    VlanEncapsulation,
    QinQEncapsulation,
    MplsEncapsulation,
    SRv6Encapsulation,
)
from .m_limits import HardwareLimits

__all__ = (
    "Stream",
    "StreamSetting",
    "EthernetConfig",
    "VlanConfig",
    "LabelStackEntry",
    "IPv4Config",
    "IPv6Config",
    "VxlanConfig",
    "EncapsulationHeader",
    "NoEncapsulation",
    "VlanEncapsulation",
    "QinQEncapsulation",
    "MplsEncapsulation",
    "SRv6Encapsulation",
    "HardwareLimits",
)
