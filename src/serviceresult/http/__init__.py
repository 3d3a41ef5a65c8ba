"""HTTP mapping of Outcomes to protocol-level response descriptors."""

from .mapping import is_mapped, to_http_response
from .response import ErrorBody, ResponseDescriptor

__all__ = ["ResponseDescriptor", "ErrorBody", "to_http_response", "is_mapped"]
