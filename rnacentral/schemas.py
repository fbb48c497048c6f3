"""Schema definitions for dictionary configuration and outputs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypedDict

EBI_SEARCH_REST_URL = "https://www.ebi.ac.uk/ebisearch/ws/rest/"
RNACENTRAL_DOMAIN = "rnacentral"

RNACENTRAL_FIELDS = (
    "id",
    "name",
    "description",
    "gene",
    "gene_synonym",
    "active",
    "expert_db",
    "rna_type",
    "species",
)


@dataclass(frozen=True)
class EbiSearchConfig:
    """Immutable settings for talking to EBI Search (rnacentral domain)."""

    dict_id: str = "https://www.rnacentral.org"
    domain: str = RNACENTRAL_DOMAIN
    fields: tuple[str, ...] = RNACENTRAL_FIELDS
    base_url: str = EBI_SEARCH_REST_URL + RNACENTRAL_DOMAIN
    # $ids / $queryString placeholders; derived from base_url when empty
    entry_url_template: str = ""
    match_url_template: str = ""
    default_page_size: int = 50
    max_page_size: int = 100
    max_start: int = 1_000_000
    response_format: str = "json"
    timeout: float = 30
    log_requests: bool = False
    abbreviation: str = "RNAcentral"
    name: str = "RNAcentral"

    def __post_init__(self) -> None:
        # frozen dataclass, so defaults are filled in via object.__setattr__
        if not self.entry_url_template:
            object.__setattr__(
                self, "entry_url_template", self.base_url + "/entry/$ids")
        if not self.match_url_template:
            object.__setattr__(
                self, "match_url_template", self.base_url + "?query=$queryString")


# "str" and "type" shadow builtins, so these use the functional form.
Term = TypedDict("Term", {"str": str})

Entry = TypedDict(
    "Entry",
    {"id": str, "dictID": str, "descr": str, "terms": list[Term], "z": dict},
    total=False,
)

Match = TypedDict(
    "Match",
    {
        "id": str,
        "dictID": str,
        "str": str,
        "descr": str,
        "type": str,
        "terms": list[Term],
        "z": dict,
    },
    total=False,
)


class DictionaryInfo(TypedDict):
    id: str
    abbreviation: str
    name: str
