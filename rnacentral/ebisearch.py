"""EBI Search URL building + HTTP client for the RNAcentral dictionary."""

from __future__ import annotations

import logging
from string import Template
from urllib.parse import quote

import requests

from rnacentral.schemas import EbiSearchConfig

logger = logging.getLogger(__name__)

BOOLEAN_OPERATORS = {"and": "AND", "or": "OR", "not": "NOT"}

# shorter words are sent without a wildcard
MIN_WILDCARD_LENGTH = 3


class EbiSearchError(RuntimeError):
    """EBI Search answered with an error status."""

    def __init__(self, url: str, status_code: int, payload=None) -> None:
        super().__init__(f"EBI Search request failed with status {status_code}: {url}")
        self.url = url
        self.status_code = status_code
        # parsed JSON error body, or raw text when the body is not JSON
        self.payload = payload


# OPTION CHECKS
def is_positive_int(value) -> bool:
    """True for ints >= 1 (bools are not accepted as page numbers)."""
    return isinstance(value, int) and not isinstance(value, bool) and value >= 1


def filter_ids(options: dict) -> list[str]:
    """Return the non-blank ids requested through `filter.id`."""
    # filter must be a dict holding an `id` list
    id_filter = options.get("filter")
    if not isinstance(id_filter, dict):
        return []
    ids = id_filter.get("id")
    if not isinstance(ids, list):
        return []
    # skip empty or whitespace-only ids (and anything that is not a string)
    return [i for i in ids if isinstance(i, str) and i.strip()]


def encode_component(value: str) -> str:
    """Percent-encode everything except unreserved characters."""
    return quote(value, safe="")


def last_path_segment(value: str) -> str:
    """Reduce an id given as a URL to its trailing path segment."""
    return value.strip().rstrip("/").split("/")[-1]


# QUERY BUILDING
def extended_search_string(text: str) -> str:
    """Rewrite free text into an EBI Search query.

    Boolean keywords are upper-cased, words of 3+ characters get a
    trailing wildcard, e.g. "tp53 and not brca" -> "tp53* AND NOT brca*".
    """
    words: list[str] = []
    for word in text.strip().split(" "):
        # consecutive spaces leave empty tokens behind
        if word == "":
            continue
        operator = BOOLEAN_OPERATORS.get(word.lower())
        if operator:
            words.append(operator)
        elif len(word) < MIN_WILDCARD_LENGTH:
            words.append(word)
        else:
            words.append(word + "*")
    return " ".join(words)


def _fields_query(config: EbiSearchConfig) -> str:
    return "fields=" + encode_component(",".join(config.fields))


def _pagination_query(options: dict, config: EbiSearchConfig) -> str:
    """Build the `&size=..&start=..` part shared by both search URLs."""
    page_size = config.default_page_size
    per_page = options.get("perPage")
    # above the service maximum we fall back to the default, not the cap
    if is_positive_int(per_page) and per_page <= config.max_page_size:
        page_size = per_page

    start = 0
    page = options.get("page")
    if is_positive_int(page):
        start = (page - 1) * page_size
        # EBI Search rejects offsets at or past its ceiling
        if start >= config.max_start:
            start = config.max_start - 1

    return f"&size={page_size}&start={start}"


def build_entry_search_url(options: dict | None, config: EbiSearchConfig) -> str:
    """Build the URL for fetching given ids, or for browsing the whole domain."""
    options = options or {}
    # blank-only id lists fall through to browsing the whole domain
    ids = filter_ids(options)

    if ids:
        # the service returns exactly the requested ids, so no pagination
        id_list = ",".join(last_path_segment(i) for i in ids)
        url = Template(config.entry_url_template).safe_substitute(ids=id_list)
        url += "?" + _fields_query(config)
    else:
        url = Template(config.match_url_template).safe_substitute(
            queryString="domain_source:" + config.domain)
        url += "&" + _fields_query(config)
        url += _pagination_query(options, config)

    return url + "&format=" + config.response_format


def build_match_search_url(text: str, options: dict | None, config: EbiSearchConfig) -> str:
    """Build the free-text search URL for `text`."""
    options = options or {}
    query = encode_component(extended_search_string(text))
    url = Template(config.match_url_template).safe_substitute(queryString=query)
    url += "&" + _fields_query(config)
    url += _pagination_query(options, config)
    return url + "&format=" + config.response_format


# HTTP CLIENT
def fetch_json(url: str, timeout: float = 30) -> dict:
    """GET `url` and return the parsed JSON body.

    Raises EbiSearchError for error statuses. Network errors and
    undecodable bodies propagate from requests unchanged.
    """
    # make HTTP GET call to the EBI Search URL w/ configured timeout
    response = requests.get(url, timeout=timeout)
    try:
        # raise exception if status is 4xx/5xx
        response.raise_for_status()
    except requests.HTTPError as err:
        # EBI Search sends a JSON error description along with the status
        try:
            payload = response.json()
        except ValueError:
            # fall back to the raw body (ex: an HTML gateway page)
            payload = response.text
        raise EbiSearchError(url, response.status_code, payload) from err
    return response.json()  # parse and return as Python dict
