"""Sorting, paging and extra-field pruning of mapped dictionary items."""

from __future__ import annotations

from rnacentral.ebisearch import is_positive_int
from rnacentral.schemas import EbiSearchConfig


def sort_entries(entries: list[dict], options: dict | None = None) -> list[dict]:
    """Sort entries case-insensitively by id, or by main term when sort='str'.

    Ties on the main term are broken by id. Unknown sort values sort by id.
    """
    options = options or {}
    # sort by main term, tie-break on id
    if options.get("sort") == "str":
        return sorted(
            entries,
            key=lambda e: (e["terms"][0]["str"].lower(), e["id"].lower()),
        )
    # "id", "dictID" and anything else sort by id
    return sorted(entries, key=lambda e: e["id"].lower())


def paginate(entries: list[dict], options: dict | None = None,
             default_page_size: int = EbiSearchConfig.default_page_size) -> list[dict]:
    """Return one page of `entries`; pages past the end are empty."""
    options = options or {}
    # invalid page numbers mean the first page
    page = options.get("page")
    if not is_positive_int(page):
        page = 1
    per_page = options.get("perPage")
    # no service cap here, the whole id-filtered list is already in memory
    if not is_positive_int(per_page):
        per_page = default_page_size

    # half-open slice, empty when the page starts past the end
    return entries[(page - 1) * per_page:min(page * per_page, len(entries))]


def prune_z(items: list[dict], z=None) -> list[dict]:
    """Keep only the requested extra fields of each item's `z` bag.

    z is None/True: keep everything. z is False: drop `z`.
    z is a key or list of keys: keep those, drop `z` when none remain.
    """
    if z is None or z is True:
        return items

    keep: list[str] | None = None
    if isinstance(z, str):
        keep = [z]
    elif isinstance(z, (list, tuple)):
        keep = list(z)
    elif z is not False:
        # anything else is not a valid selector, leave items untouched
        return items

    pruned: list[dict] = []
    for item in items:
        # copy so the caller's items keep their bags
        item = dict(item)
        bag = item.pop("z", None)
        if keep is not None and bag is not None:
            selected = {k: bag[k] for k in keep if k in bag}
            if selected:
                item["z"] = selected
        pruned.append(item)
    return pruned
