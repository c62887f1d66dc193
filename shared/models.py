from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping


@dataclass(frozen=True)
class StoredRequest:
    """Record of one ProcessRequest invocation as stored in Cosmos DB."""

    id: str
    public_ip_address: str
    response_message: str
    request_headers: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        if not self.id:
            raise ValueError("StoredRequest requires a non-empty id")
        # read-only copy, detached from the inbound request
        object.__setattr__(self, "request_headers", MappingProxyType(dict(self.request_headers)))

    def to_document(self) -> Dict[str, object]:
        return {
            "id": self.id,
            "requestHeaders": dict(self.request_headers),
            "responseMessage": self.response_message,
            "publicIpAddress": self.public_ip_address,
        }
