from __future__ import annotations


class ServiceError(Exception):
    """
    Base for every error that reaches the HTTP boundary.

    Subclasses pin a stable `code` and the HTTP status the API answers with.
    """

    code = "SERVICE_ERROR"
    http_status = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class QueryError(ServiceError):
    code = "QUERY_FAILED"
    http_status = 500


class InvalidAddressError(QueryError):
    http_status = 400

    def __init__(self, field: str, value: object = None) -> None:
        if field not in ("contract", "wallet"):
            raise ValueError(f"unknown address field: {field}")
        self.field = field
        self.value = value
        super().__init__(f"Invalid {field} address")

    @property
    def code(self) -> str:  # type: ignore[override]
        return f"INVALID_{self.field.upper()}_ADDRESS"


class BalanceReadFailedError(QueryError):
    code = "BALANCE_READ_FAILED"
    http_status = 400

    def __init__(self, message: str = "Contract not found or not a valid ERC-20 token") -> None:
        super().__init__(message)


class TransportFailureError(QueryError):
    code = "TRANSPORT_FAILURE"
    http_status = 500

    def __init__(self, message: str = "Unable to reach the blockchain RPC endpoint") -> None:
        super().__init__(message)


class ConfigurationError(ServiceError):
    code = "CONFIGURATION_ERROR"
    http_status = 500


class MalformedRequestError(ServiceError):
    code = "MALFORMED_REQUEST"
    http_status = 400


class CompletionError(ServiceError):
    code = "COMPLETION_FAILED"
    http_status = 502
