from typing import TYPE_CHECKING
from ..utils import constants as const

if TYPE_CHECKING:
    from ..model import Stream
    from ..model.m_encapsulation import EncapsulationHeader


def calculate_overhead(stream: "Stream", header: "EncapsulationHeader") -> int:
    """Bytes the stream's headers add on top of its frame size."""
    overhead = header.overhead
    if stream.vxlan:
        overhead += const.VXLAN_OVERHEAD
    if stream.is_ipv6:
        overhead += const.IPV6_EXTRA_LENGTH
    return overhead
