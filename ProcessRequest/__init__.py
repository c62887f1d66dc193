import logging

import azure.functions as func

from shared.config import load_settings
from shared.cosmos_client import store_request
from shared.ipify import get_public_ip_address
from shared.models import StoredRequest

NAME_PARAMETER = "name"
DEFAULT_NAME = "dude"
ERROR_MESSAGE = "An error occurred while processing the request."


def build_message(name: str, public_ip_address: str) -> str:
    return (
        f"Hi {name}, the HTTP triggered function invoked "
        f"the external service using the {public_ip_address} public IP address."
    )


def main(req: func.HttpRequest, context: func.Context) -> func.HttpResponse:
    """Greet the caller with the app's public IP address and store the exchange.

    GET /api/ProcessRequest?name=<name>

    The ipify lookup is best-effort: on failure the address is reported as
    UNKNOWN. Any other failure, including the Cosmos DB write, returns 400
    with a generic body.
    """
    prefix = f"'{context.function_name}' (Running, Id={context.invocation_id}) "
    try:
        name = req.params.get(NAME_PARAMETER) or DEFAULT_NAME
        logging.info("Started %sA request has been received from %s", prefix, name)

        settings = load_settings()
        public_ip_address = get_public_ip_address(log_prefix=prefix)

        response_message = build_message(name, public_ip_address)

        record = StoredRequest(
            id=context.invocation_id,
            public_ip_address=public_ip_address,
            response_message=response_message,
            request_headers=dict(req.headers),
        )

        store_request(record, settings)
        logging.info("Completed %sThe response has been successfully stored to Cosmos DB", prefix)

        return func.HttpResponse(response_message, status_code=200, mimetype="text/plain")
    except Exception as e:
        logging.exception("Failed %s%s", prefix, e)
        return func.HttpResponse(ERROR_MESSAGE, status_code=400, mimetype="text/plain")
