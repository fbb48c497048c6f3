"""RNAcentral dictionary: id lookup and text search over EBI Search."""

from __future__ import annotations

import logging
from collections.abc import Callable
from functools import partial

from rnacentral.ebisearch import (
    build_entry_search_url,
    build_match_search_url,
    fetch_json,
    filter_ids,
)
from rnacentral.ebisearch_parse import map_to_entries, map_to_matches
from rnacentral.results import paginate, prune_z, sort_entries
from rnacentral.schemas import DictionaryInfo, EbiSearchConfig

logger = logging.getLogger(__name__)


class RNAcentralDictionary:
    """Dictionary source backed by the EBI Search `rnacentral` domain.

    `fetch` takes a URL and returns the parsed JSON body; it defaults to
    an HTTP GET through requests.
    """

    def __init__(
        self,
        config: EbiSearchConfig | None = None,
        fetch: Callable[[str], dict] | None = None,
    ) -> None:
        self.config = config or EbiSearchConfig()
        self.fetch = fetch or partial(fetch_json, timeout=self.config.timeout)

    def get_dictionary_info(self) -> DictionaryInfo:
        return {
            "id": self.config.dict_id,
            "abbreviation": self.config.abbreviation,
            "name": self.config.name,
        }

    def get_dictionary_infos(self, options: dict | None = None) -> dict:
        """List-shaped variant of get_dictionary_info (there is only one)."""
        return {"items": [self.get_dictionary_info()]}

    def get_entries(self, options: dict | None = None) -> dict:
        """Fetch entries, either the requested `filter.id` ones or a page of all."""
        options = options or {}
        # build the ids-or-browse URL and fetch the raw EBI Search payload
        url = build_entry_search_url(options, self.config)
        response = self._request(url)

        # map raw records into entry dicts
        entries = map_to_entries(response, self.config)
        # only explicitly requested ids are sorted and paged here, browse results
        # are already a server-side page; ids the service does not know are absent
        if filter_ids(options):
            entries = paginate(
                sort_entries(entries, options), options, self.config.default_page_size
            )

        return {"items": prune_z(entries, options.get("z"))}

    def get_matches_for_text(self, text: str, options: dict | None = None) -> dict:
        """Search entries whose labels match `text`."""
        options = options or {}
        if not text or not text.strip():
            return {"items": []}

        # rewrite the text into a wildcard query and fetch one page of hits
        url = build_match_search_url(text, options, self.config)
        response = self._request(url)

        # map raw records into match dicts, then keep only the requested z fields
        matches = map_to_matches(response, text, self.config)
        return {"items": prune_z(matches, options.get("z"))}

    def _request(self, url: str) -> dict:
        # log the URL (INFO when request logging is switched on)
        level = logging.INFO if self.config.log_requests else logging.DEBUG
        logger.log(level, "URL: %s", url)
        response = self.fetch(url)
        logger.debug("EBI Search returned %d entries", len(response.get("entries", [])))
        return response
