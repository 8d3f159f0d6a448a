def format_number(value: float | int | None, missing: str = "N/A") -> str:
    """Digit-grouped number, e.g. 67391582 -> "67,391,582", 0.44 -> "0.44"."""
    if value is None:
        return missing
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,.3f}".rstrip("0").rstrip(".")


def or_na(value: str | None) -> str:
    return value or "N/A"


def country_noun(count: int) -> str:
    return "country" if count == 1 else "countries"


def showing_status(count: int) -> str:
    return f"Showing {count} countries."


def found_status(count: int, query: str) -> str:
    return f'Found {count} {country_noun(count)} for "{query}".'
