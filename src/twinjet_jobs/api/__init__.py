from .client import JobsClient, require_address, resolve_config, validate_identifier
from .dates import to_iso_utc
from .normalize import format_validation_errors
from .replay import ReplayTransport
from .transport import RequestsTransport, Transport

__all__ = [
    "JobsClient",
    "ReplayTransport",
    "RequestsTransport",
    "Transport",
    "format_validation_errors",
    "require_address",
    "resolve_config",
    "to_iso_utc",
    "validate_identifier",
]
