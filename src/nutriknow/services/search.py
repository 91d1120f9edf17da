"""Catalog search and category filtering."""

from nutriknow.domain.catalog import ALL_CATEGORIES, Catalog, FoodItem


def visible_items(
    catalog: Catalog, search_term: str = "", category: str = ALL_CATEGORIES
) -> list[FoodItem]:
    """Return catalog items matching the search term and category."""
    needle = search_term.lower()
    return [
        item
        for item in catalog.items
        if needle in item.name.lower()
        and (category == ALL_CATEGORIES or item.category == category)
    ]


def categories(catalog: Catalog) -> list[str]:
    """Return the category options, "All" first then first-seen order."""
    seen = dict.fromkeys(item.category for item in catalog.items)
    return [ALL_CATEGORIES, *seen]
