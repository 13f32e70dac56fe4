from enum import Enum


class CaseInsensitiveEnum(Enum):
    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            for member in cls:
                if isinstance(member.value, str) and member.value.lower() == value.lower():
                    return member


# hardware limits of the P4 traffic generator
MAX_NUM_MPLS_LABEL = 15
MAX_NUM_SRV6_SIDS = 3
MAX_BUFFER_SIZE = 20000
# Gbps
TG_MAX_RATE = 100.0
TG_MAX_RATE_TF2 = 400.0

# https://en.wikipedia.org/wiki/Ethernet_frame
# 20 = Preamble + Start frame delimiter + Interpacket gap
INTER_FRAME_OVERHEAD = 20

VLAN_HEADER_LENGTH = 4
LSE_LENGTH = 4
IPV6_HEADER_LENGTH = 40
SRH_BASE_LENGTH = 8
SID_LENGTH = 16
# outer Ethernet + IPv4 + UDP + VxLAN
VXLAN_OVERHEAD = 14 + 20 + 8 + 8
# IPv6 header minus IPv4 header
IPV6_EXTRA_LENGTH = 20

MAX_VLAN_ID = 4095
MAX_PCP = 7
MAX_MPLS_LABEL = 2**20 - 1
MAX_MPLS_TC = 7
MAX_TTL = 255
MAX_FLOW_LABEL = 2**20 - 1
MAX_VNI = 2**24 - 1
MAX_UDP_PORT = 65535


class Encapsulation(CaseInsensitiveEnum):
    NONE = "None"
    VLAN = "Vlan"
    QINQ = "QinQ"
    MPLS = "Mpls"
    SRV6 = "SRv6"

    @property
    def is_vlan(self) -> bool:
        return self in (type(self).VLAN, type(self).QINQ)

    @property
    def is_mpls(self) -> bool:
        return self == type(self).MPLS

    @property
    def is_srv6(self) -> bool:
        return self == type(self).SRV6


class GenerationMode(CaseInsensitiveEnum):
    RATE = "Rate"
    MPPS = "Mpps"
    ANALYZE = "Analyze"

    @classmethod
    def _missing_(cls, value):
        # constant bit rate is the rate mode under its generator name
        if isinstance(value, str) and value.lower() == "cbr":
            return cls.RATE
        return super()._missing_(value)

    @property
    def is_analyze(self) -> bool:
        return self == type(self).ANALYZE

    @property
    def is_mpps(self) -> bool:
        return self == type(self).MPPS


class IPVersion(int, Enum):
    IPV4 = 4
    IPV6 = 6