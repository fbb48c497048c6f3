"""Tests for mapping EBI Search records to entries and matches."""

from rnacentral.ebisearch_parse import (
    build_terms,
    build_z,
    extract_synonyms,
    get_main_term,
    map_to_entries,
    map_to_matches,
)


def make_record(**fields) -> dict:
    base = {
        "id": ["URS0000000001_9606"],
        "name": [],
        "description": [],
        "gene": [],
        "gene_synonym": [],
        "active": [],
        "expert_db": [],
        "rna_type": [],
        "species": [],
    }
    base.update(fields)
    return {"fields": base}


def test_map_to_entries_maps_hotair_record(config, id_response) -> None:
    got = map_to_entries(id_response, config)

    assert got == [
        {
            "id": "https://www.rnacentral.org/rna/URS0000301B08_9606",
            "dictID": "https://www.rnacentral.org",
            "descr": "Homo sapiens (human) non-protein coding HOTAIR:1",
            "terms": [
                {"str": "Unique RNA Sequence URS0000301B08_9606"},
                {"str": "HOTAIR"},
                {"str": "NONHSAG011264.2"},
                {"str": "OTTHUMG00000152934.1"},
                {"str": "ENSG00000228630"},
                {"str": "ENSG00000228630.5"},
                {"str": "ENSG00000228630.1"},
                {"str": "HOXC-AS4"},
                {"str": "NCRNA00072"},
                {"str": "HOXC11-AS1"},
            ],
            "z": {
                "obsolete": False,
                "databases": ["NONCODE", "GENCODE", "LNCipedia", "Ensembl"],
                "RNAtype": "lncRNA",
                "species": "Homo sapiens",
            },
        }
    ]


def test_map_to_matches_maps_melanoma_record(config, melanoma_response) -> None:
    got = map_to_matches(melanoma_response, "melanoma", config)

    assert got == [
        {
            "id": "https://www.rnacentral.org/rna/URS0000BD2F89_9606",
            "dictID": "https://www.rnacentral.org",
            "str": "Unique RNA Sequence URS0000BD2F89_9606",
            "descr": "Homo sapiens (human) survival associated mitochondrial "
                     "melanoma specific oncogenic non-coding RNA (SAMMSON)",
            "type": "T",
            "terms": [
                {"str": "Unique RNA Sequence URS0000BD2F89_9606"},
                {"str": "SAMMSON"},
                {"str": "HSALNG0026715"},
                {"str": "ENSG00000240405.6"},
            ],
            "z": {
                "obsolete": False,
                "databases": ["LncBook", "GENCODE", "LNCipedia", "Ensembl"],
                "RNAtype": "lncRNA",
                "species": "Homo sapiens",
            },
        }
    ]


def test_map_to_matches_marks_prefix_matches_case_sensitively(config) -> None:
    response = {"entries": [
        make_record(gene=["TP53-AS1"]),
        make_record(gene=["tp53-as1"]),
    ]}

    got = [m["type"] for m in map_to_matches(response, "TP53", config)]

    assert got == ["S", "T"]


def test_map_to_entries_handles_missing_entries(config) -> None:
    assert map_to_entries({}, config) == []
    assert map_to_entries({"hitCount": 0, "entries": []}, config) == []


def test_map_to_entries_omits_unknown_description(config) -> None:
    got = map_to_entries({"entries": [make_record(name=["x"])]}, config)

    assert "descr" not in got[0]


def test_build_z_only_active_field() -> None:
    got = build_z(make_record(active=["Active"]))

    assert got == {"obsolete": False}
    assert "databases" not in got


def test_build_z_marks_inactive_record_obsolete() -> None:
    assert build_z(make_record(active=["Obsolete"])) == {"obsolete": True}


def test_build_z_without_active_omits_obsolete() -> None:
    got = build_z(make_record(rna_type=["miRNA"], species=["Mus musculus"]))

    assert got == {"RNAtype": "miRNA", "species": "Mus musculus"}


def test_extract_synonyms_keeps_first_occurrence() -> None:
    assert extract_synonyms(["a", "b"], ["b", "c"]) == ["a", "b", "c"]
    assert extract_synonyms([], []) == []


def test_get_main_term_priority() -> None:
    assert get_main_term(["name"], ["gene"], ["syn"]) == "name"
    assert get_main_term([], ["gene"], ["syn"]) == "gene"
    assert get_main_term([], [], ["syn"]) == "syn"
    assert get_main_term([], [], []) == ""


def test_build_terms_main_term_from_gene_is_not_repeated() -> None:
    got = build_terms([], ["A", "B"], ["A", "C"])

    assert got == [{"str": "A"}, {"str": "B"}, {"str": "C"}]


def test_build_terms_main_term_from_name_keeps_equal_gene() -> None:
    got = build_terms(["A"], ["A"], [])

    assert got == [{"str": "A"}, {"str": "A"}]


def test_build_terms_for_empty_record() -> None:
    assert build_terms([], [], []) == [{"str": ""}]
