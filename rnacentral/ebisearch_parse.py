"""Parsing helpers turning EBI Search (rnacentral) records into entries/matches."""

from __future__ import annotations

from rnacentral.schemas import EbiSearchConfig, Entry, Match, Term


def _field(record: dict, name: str) -> list[str]:
    """Return one multi-valued field of a record ([] when missing)."""
    return record.get("fields", {}).get(name) or []


def _first(values: list[str]) -> str | None:
    return values[0] if values else None


def get_main_term(name: list[str], gene: list[str], gene_synonyms: list[str]) -> str:
    """Pick the label shown first: name, else gene, else gene synonym."""
    for values in (name, gene, gene_synonyms):
        if values:
            return values[0]
    # none of the three is filled in a valid record
    return ""


def extract_synonyms(gene: list[str], gene_synonyms: list[str]) -> list[str]:
    """Gene names then gene synonyms, exact duplicates removed, order kept."""
    seen: set[str] = set()
    synonyms: list[str] = []
    for value in list(gene) + list(gene_synonyms):
        if value in seen:
            continue
        seen.add(value)
        synonyms.append(value)
    return synonyms


def build_terms(name: list[str], gene: list[str], gene_synonyms: list[str]) -> list[Term]:
    """Main term first, then the deduplicated synonyms."""
    main_term = get_main_term(name, gene, gene_synonyms)
    synonyms = extract_synonyms(gene, gene_synonyms)
    if not name:
        # main term came out of the synonym lists, keep it only once
        synonyms = [s for s in synonyms if s != main_term]
    return [{"str": main_term}] + [{"str": s} for s in synonyms]


def build_z(record: dict) -> dict:
    """Extra-field bag holding only the fields the record actually has."""
    z: dict = {}

    # anything but "Active" counts as obsolete
    active = _field(record, "active")
    if active:
        z["obsolete"] = active[0] != "Active"

    databases = _field(record, "expert_db")
    if databases:
        z["databases"] = list(databases)

    rna_type = _field(record, "rna_type")
    if rna_type:
        z["RNAtype"] = rna_type[0]

    species = _field(record, "species")
    if species:
        z["species"] = species[0]

    return z


def record_to_entry(record: dict, config: EbiSearchConfig) -> Entry:
    """Map one raw EBI Search record to an entry dict."""
    # the three label sources, each a list of strings
    name = _field(record, "name")
    gene = _field(record, "gene")
    gene_synonyms = _field(record, "gene_synonym")

    # id is prefixed with the dictionary id to make it a full URI
    entry: Entry = {
        "id": config.dict_id + "/rna/" + (_first(_field(record, "id")) or ""),
        "dictID": config.dict_id,
    }
    # description is single-valued in practice, take the first one
    descr = _first(_field(record, "description"))
    if descr is not None:
        entry["descr"] = descr
    entry["terms"] = build_terms(name, gene, gene_synonyms)
    entry["z"] = build_z(record)
    return entry


def map_to_entries(response: dict, config: EbiSearchConfig) -> list[Entry]:
    """Map an EBI Search response to a list of entries."""
    return [record_to_entry(r, config) for r in response.get("entries", [])]


def map_to_matches(response: dict, text: str, config: EbiSearchConfig) -> list[Match]:
    """Map an EBI Search response to matches for the searched `text`."""
    matches: list[Match] = []
    for record in response.get("entries", []):
        # reuse the entry mapping, then add the matched label
        entry = record_to_entry(record, config)
        main_term = entry["terms"][0]["str"]

        match: Match = {"id": entry["id"], "dictID": entry["dictID"], "str": main_term}
        if "descr" in entry:
            match["descr"] = entry["descr"]
        # 'S': label starts with the searched text (case-sensitive)
        match["type"] = "S" if main_term.startswith(text) else "T"
        match["terms"] = entry["terms"]
        match["z"] = entry["z"]
        matches.append(match)
    return matches
