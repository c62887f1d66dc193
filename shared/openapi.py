"""OpenAPI description metadata for the function app.

Read once by an external document generator; nothing here renders a
document or serves an endpoint.
"""
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple


@dataclass(frozen=True)
class OpenApiContact:
    name: str
    email: str
    url: str

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name, "email": self.email, "url": self.url}


@dataclass(frozen=True)
class OpenApiLicense:
    name: str
    url: str

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name, "url": self.url}


@dataclass(frozen=True)
class OpenApiInfo:
    version: str
    title: str
    description: str
    terms_of_service: str
    contact: OpenApiContact
    license: OpenApiLicense

    def to_dict(self) -> dict:
        return {
            "version": self.version,
            "title": self.title,
            "description": self.description,
            "termsOfService": self.terms_of_service,
            "contact": self.contact.to_dict(),
            "license": self.license.to_dict(),
        }


@dataclass(frozen=True)
class OpenApiServer:
    url: str
    description: str

    def to_dict(self) -> Dict[str, str]:
        return {"url": self.url, "description": self.description}


@dataclass(frozen=True)
class OpenApiParameter:
    name: str
    location: str
    required: bool
    type: str
    summary: str
    description: str

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "in": self.location,
            "required": self.required,
            "description": self.description,
            "schema": {"type": self.type},
        }


@dataclass(frozen=True)
class OpenApiResponse:
    status_code: int
    content_type: str
    body_type: str
    summary: str
    description: str

    def to_dict(self) -> dict:
        return {
            "description": self.description,
            "content": {self.content_type: {"schema": {"type": self.body_type}}},
        }


@dataclass(frozen=True)
class OpenApiOperation:
    """Declarative description of one HTTP-triggered function."""

    function_name: str
    method: str
    operation_id: str
    tags: Tuple[str, ...]
    summary: str
    description: str
    parameters: Tuple[OpenApiParameter, ...] = ()
    responses: Tuple[OpenApiResponse, ...] = ()

    def to_dict(self) -> dict:
        return {
            "operationId": self.operation_id,
            "tags": list(self.tags),
            "summary": self.summary,
            "description": self.description,
            "parameters": [p.to_dict() for p in self.parameters],
            "responses": {str(r.status_code): r.to_dict() for r in self.responses},
        }


@dataclass(frozen=True)
class OpenApiConfigurationOptions:
    info: OpenApiInfo
    servers: Tuple[OpenApiServer, ...]
    operations: Tuple[OpenApiOperation, ...] = field(default=())

    def operation(self, function_name: str) -> Optional[OpenApiOperation]:
        for op in self.operations:
            if op.function_name == function_name:
                return op
        return None

    def to_dict(self) -> dict:
        return {
            "info": self.info.to_dict(),
            "servers": [s.to_dict() for s in self.servers],
        }


PROCESS_REQUEST_OPERATION = OpenApiOperation(
    function_name="ProcessRequest",
    method="get",
    operation_id="GetPublicIpAddress",
    tags=("name",),
    summary="Gets the name",
    description="This method calls the Ipify external site to get the public IP address of the Azure Function app.",
    parameters=(
        OpenApiParameter(
            name="name",
            location="query",
            required=False,
            type="string",
            summary="The name of the user that sends the message.",
            description="The name",
        ),
    ),
    responses=(
        OpenApiResponse(
            status_code=200,
            content_type="text/plain",
            body_type="string",
            summary="The response",
            description="This returns the response",
        ),
    ),
)

OPENAPI_OPTIONS = OpenApiConfigurationOptions(
    info=OpenApiInfo(
        version="1.0.0",
        title="Open API Document on Azure Functions",
        description="HTTP APIs that run on Azure Functions using Open API specification.",
        terms_of_service="https://github.com/Azure/azure-functions-openapi-extension",
        contact=OpenApiContact(
            name="Paolo Salvatori",
            email="paolos@microsoft.com",
            url="https://github.com/Azure/azure-functions-openapi-extension/issues",
        ),
        license=OpenApiLicense(name="MIT", url="http://opensource.org/licenses/MIT"),
    ),
    servers=(OpenApiServer(url="/", description="This is the default server"),),
    operations=(PROCESS_REQUEST_OPERATION,),
)
