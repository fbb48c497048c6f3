"""RNAcentral dictionary package exports."""

from rnacentral.config import load_config
from rnacentral.dictionary import RNAcentralDictionary
from rnacentral.ebisearch import (
    EbiSearchError,
    build_entry_search_url,
    build_match_search_url,
    extended_search_string,
    fetch_json,
)
from rnacentral.ebisearch_parse import extract_synonyms, map_to_entries, map_to_matches
from rnacentral.results import paginate, prune_z, sort_entries
from rnacentral.schemas import EbiSearchConfig

__all__ = [
    "RNAcentralDictionary",
    "EbiSearchConfig",
    "EbiSearchError",
    "load_config",
    "build_entry_search_url",
    "build_match_search_url",
    "extended_search_string",
    "fetch_json",
    "map_to_entries",
    "map_to_matches",
    "extract_synonyms",
    "sort_entries",
    "paginate",
    "prune_z",
]
