from .dataset import TrafficGenRequest
from .entry import RequestValidator, Verdict, validate_request
from .model import Stream, StreamSetting, HardwareLimits
from .utils.constants import Encapsulation, GenerationMode
from .utils.exceptions import RequestValidationError

__all__ = (
    "TrafficGenRequest",
    "RequestValidator",
    "Verdict",
    "validate_request",
    "Stream",
    "StreamSetting",
    "HardwareLimits",
    "Encapsulation",
    "GenerationMode",
    "RequestValidationError",
)
