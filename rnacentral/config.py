"""Environment-driven configuration for the RNAcentral dictionary."""

from __future__ import annotations

import os

from rnacentral.schemas import EBI_SEARCH_REST_URL, RNACENTRAL_DOMAIN, EbiSearchConfig

TRUE_VALUES = {"1", "true", "yes", "on"}


def load_config() -> EbiSearchConfig:
    """Build an EbiSearchConfig from RNACENTRAL_* environment variables."""

    # Read optional overrides with safe defaults for the public EBI Search endpoint.
    base_url = os.getenv("RNACENTRAL_BASE_URL", EBI_SEARCH_REST_URL + RNACENTRAL_DOMAIN)
    response_format = os.getenv("RNACENTRAL_FORMAT", "json")
    log_requests = os.getenv("RNACENTRAL_LOG", "").strip().lower() in TRUE_VALUES

    raw_timeout = os.getenv("RNACENTRAL_TIMEOUT", "30")
    try:
        timeout = float(raw_timeout)
    except ValueError:
        raise ValueError(
            f"RNACENTRAL_TIMEOUT must be a number of seconds, got {raw_timeout!r}"
        ) from None

    return EbiSearchConfig(
        base_url=base_url.rstrip("/"),
        response_format=response_format,
        timeout=timeout,
        log_requests=log_requests,
    )
