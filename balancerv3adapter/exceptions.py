class AdapterError(Exception):
    """Base class for every error raised by the adapter."""


class FormatError(AdapterError, ValueError):
    """Malformed input: pair id, block range, address."""


class AddressFormatError(FormatError):
    pass


class NotFoundError(AdapterError, LookupError):
    """Pool, pair or asset does not exist."""


class UnsupportedChainError(AdapterError):
    pass


class UpstreamError(AdapterError):
    """Subgraph, token registry or RPC request failed."""


class RetriableUpstreamError(UpstreamError):
    """Upstream failure that may succeed when the request is sent again."""
