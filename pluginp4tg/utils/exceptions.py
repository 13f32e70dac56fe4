class RequestValidationError(Exception):
    """A traffic generation request that must not reach the generator."""

    def __init__(self, msg: str) -> None:
        self.msg = msg
        super().__init__(self.msg)


class LSECountMissing(RequestValidationError):
    def __init__(self, stream_id: int) -> None:
        super().__init__(f"number_of_lse missing for stream #{stream_id}")


class LSECountExceed(RequestValidationError):
    def __init__(self, stream_id: int, max: int) -> None:
        super().__init__(
            f"Configured number of LSEs in stream with ID #{stream_id} exceeded maximum of {max}."
        )


class LSECountZero(RequestValidationError):
    def __init__(self, stream_id: int) -> None:
        super().__init__(
            f"MPLS encapsulation selected for stream with ID #{stream_id} but #LSE is zero."
        )


class SRv6NotSupport(RequestValidationError):
    def __init__(self) -> None:
        super().__init__("SRv6 is only supported on Tofino2.")


class SIDCountMissing(RequestValidationError):
    def __init__(self, stream_id: int) -> None:
        super().__init__(f"number_of_srv6_sids missing for stream #{stream_id}")


class SIDCountExceed(RequestValidationError):
    def __init__(self, stream_id: int, max: int) -> None:
        super().__init__(
            f"Configured number of SIDs in stream with ID #{stream_id} exceeded maximum of {max}."
        )


class SIDCountZero(RequestValidationError):
    def __init__(self, stream_id: int) -> None:
        super().__init__(
            f"SRv6 encapsulation selected for stream with ID #{stream_id} but #SIDs is zero."
        )


class VlanSettingMissing(RequestValidationError):
    def __init__(self, stream_id: int, port: int) -> None:
        super().__init__(
            f"VLAN encapsulation selected for stream with ID #{stream_id}, but no VLAN settings provided for port {port}."
        )


class MplsStackMissing(RequestValidationError):
    def __init__(self, stream_id: int, port: int) -> None:
        super().__init__(
            f"No MPLS stack provided for stream with ID #{stream_id} on port {port}."
        )


class MplsStackLengthMismatch(RequestValidationError):
    def __init__(self, stream_id: int, port: int, cur: int, expected: int) -> None:
        super().__init__(
            f"Number of LSEs in stream with ID #{stream_id} does not match length of the MPLS stack on port {port} (expected {expected}, has {cur})."
        )


class SIDListMissing(RequestValidationError):
    def __init__(self, stream_id: int, port: int) -> None:
        super().__init__(
            f"No SID list provided for stream with ID #{stream_id} on port {port}."
        )


class SIDListLengthMismatch(RequestValidationError):
    def __init__(self, stream_id: int, port: int, cur: int, expected: int) -> None:
        super().__init__(
            f"Number of SIDs in stream with ID #{stream_id} does not match length of the SID list on port {port} (expected {expected}, has {cur})."
        )


class IPVersionNotSupport(RequestValidationError):
    def __init__(self, stream_id: int, port: int) -> None:
        super().__init__(
            f"Unsupported IP version for stream with ID #{stream_id} on port {port}."
        )


class IPv4SettingMissing(RequestValidationError):
    def __init__(self, stream_id: int, port: int) -> None:
        super().__init__(
            f"Missing IPv4 settings for stream with ID #{stream_id} on port {port}."
        )


class IPv6SettingMissing(RequestValidationError):
    def __init__(self, stream_id: int, port: int) -> None:
        super().__init__(
            f"Missing IPv6 settings for stream with ID #{stream_id} on port {port}."
        )


class VxlanSettingMissing(RequestValidationError):
    def __init__(self, stream_id: int, port: int) -> None:
        super().__init__(
            f"Stream with ID #{stream_id} is a VxLAN stream but no VxLAN settings provided for port {port}."
        )


class VxlanIPv6NotSupport(RequestValidationError):
    def __init__(self, stream_id: int) -> None:
        super().__init__(
            f"VxLAN with IPv6 is not supported! (Stream with ID #{stream_id})"
        )


class VxlanSRv6NotSupport(RequestValidationError):
    def __init__(self, stream_id: int) -> None:
        super().__init__(
            f"Combination of VxLAN and SRv6 is not supported (Stream with ID #{stream_id})"
        )


class BufferSizeExceed(RequestValidationError):
    def __init__(self, cur: int, max: int) -> None:
        super().__init__(
            f"Sum of packet size too large ({cur}B). Maximal sum of packets size: {max}B"
        )


class NoActiveStream(RequestValidationError):
    def __init__(self) -> None:
        super().__init__("No active streams provided.")


class NoStream(RequestValidationError):
    def __init__(self) -> None:
        super().__init__("No stream provided.")


class TrafficRateExceed(RequestValidationError):
    def __init__(self, cur: float, max: float) -> None:
        super().__init__(
            f"Traffic rate in sum larger than maximal supported rate ({cur:.2f} Gbps > {max:.2f} Gbps)."
        )


class UnknownStreamReference(RequestValidationError):
    def __init__(self, stream_id: int, port: int) -> None:
        super().__init__(
            f"Stream setting on port {port} references unknown stream with ID #{stream_id}."
        )


class LimitsFileNotValid(Exception):
    def __init__(self, path: str, reason: str) -> None:
        self.msg = f"Hardware limits file {path} is not valid: {reason}"
        super().__init__(self.msg)


class MacAddressNotValid(ValueError):
    def __init__(self, value: str) -> None:
        self.msg = f"{value} is not a valid MAC address."
        super().__init__(self.msg)
