import logging

import requests

IPIFY_URL = "https://api.ipify.org"
UNKNOWN = "UNKNOWN"

# seconds
DEFAULT_TIMEOUT = 10


def get_public_ip_address(timeout: float = DEFAULT_TIMEOUT, log_prefix: str = "") -> str:
    """Return the public IP address reported by ipify, or UNKNOWN.

    Best-effort: a non-2xx status or any other fault is logged and
    swallowed.
    """
    try:
        resp = requests.get(IPIFY_URL, timeout=timeout)
        resp.raise_for_status()
    except Exception as e:
        logging.exception("Error %sAn error occurred while calling %s: %s", log_prefix, IPIFY_URL, e)
        return UNKNOWN

    address = resp.text.strip()
    logging.info("Running %sCall to %s returned %s", log_prefix, IPIFY_URL, address)
    return address
