"""Exception classes for tableland-env."""


class NetworkConfigError(Exception):
    """Base exception for network configuration errors."""

    pass


class UnknownNetworkError(NetworkConfigError, ValueError):
    """Raised when a network identifier has no entry in an attribute table."""

    def __init__(self, network: str, table: str | None = None):
        self.network = network
        self.table = table
        if table:
            message = f"Unknown network {network!r} in {table} table"
        else:
            message = f"Unknown network {network!r}"
        super().__init__(message)


class IncompleteTableError(NetworkConfigError, ValueError):
    """Raised when an attribute table lacks entries for selectable networks."""

    def __init__(self, table: str, missing: list[str]):
        self.table = table
        self.missing = tuple(missing)
        super().__init__(f"{table} table is missing networks: {', '.join(missing)}")


class MalformedAttributeError(NetworkConfigError, ValueError):
    """Raised when an attribute value fails its format check."""

    def __init__(self, network: str, attribute: str, value: object, reason: str):
        self.network = network
        self.attribute = attribute
        self.value = value
        super().__init__(f"Malformed {attribute} for {network!r}: {value!r} ({reason})")
