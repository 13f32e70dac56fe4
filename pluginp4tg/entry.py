from typing import TYPE_CHECKING, List, NamedTuple, Optional, Sequence
from .model import HardwareLimits
from .plugin import config_checkers as checkers
from .utils import constants as const
from .utils.exceptions import RequestValidationError
from .utils.logger import logger

if TYPE_CHECKING:
    from .model import Stream, StreamSetting
    from .model.m_encapsulation import EncapsulationHeader


class Verdict(NamedTuple):
    accepted: bool
    reason: Optional[str] = None


class RequestValidator:
    """Gate between an incoming request and the traffic generator.

    ``validate`` raises the first :class:`RequestValidationError` met while
    walking the checks in a fixed order:

    1. encapsulation of each stream
    2. the stream's own settings (VLAN, MPLS stack, SID list, IP addressing)
    3. VxLAN of the stream against every setting of the request
    4. sum of frame sizes
    5. streams and settings present (not in Analyze mode)
    6. aggregate rate (not in Analyze mode)
    7. settings referencing unknown streams (only if enabled in the limits)
    """

    def __init__(self, limits: Optional[HardwareLimits] = None) -> None:
        self.limits = limits or HardwareLimits()

    def __check_streams(
        self,
        streams: Sequence["Stream"],
        settings: Sequence["StreamSetting"],
        is_tofino2: bool,
    ) -> List["EncapsulationHeader"]:
        headers = []
        for stream in streams:
            header = checkers.resolve_encapsulation(stream, is_tofino2, self.limits)
            for setting in settings:
                if setting.stream_id == stream.stream_id:
                    checkers.check_stream_setting(stream, header, setting)
                checkers.check_vxlan(stream, header, setting)
            headers.append(header)
        return headers

    def validate(
        self,
        streams: Sequence["Stream"],
        settings: Sequence["StreamSetting"],
        mode: const.GenerationMode,
        is_tofino2: bool,
    ) -> None:
        logger.debug(
            f"validate {len(streams)} streams, {len(settings)} settings, mode {mode.value}, tofino2 {is_tofino2}"
        )
        try:
            headers = self.__check_streams(streams, settings, is_tofino2)
            checkers.check_buffer_size(streams, self.limits)
            checkers.check_not_empty(streams, settings, mode)
            checkers.check_traffic_rate(streams, headers, mode, is_tofino2, self.limits)
            if self.limits.check_stream_references:
                checkers.check_stream_references(streams, settings)
        except RequestValidationError as e:
            logger.warning(f"request rejected: {e.msg}")
            raise
        logger.debug("request accepted")

    def verdict(
        self,
        streams: Sequence["Stream"],
        settings: Sequence["StreamSetting"],
        mode: const.GenerationMode,
        is_tofino2: bool,
    ) -> Verdict:
        try:
            self.validate(streams, settings, mode, is_tofino2)
        except RequestValidationError as e:
            return Verdict(False, e.msg)
        return Verdict(True)


def validate_request(
    streams: Sequence["Stream"],
    settings: Sequence["StreamSetting"],
    mode: const.GenerationMode,
    is_tofino2: bool,
    limits: Optional[HardwareLimits] = None,
) -> None:
    RequestValidator(limits).validate(streams, settings, mode, is_tofino2)
