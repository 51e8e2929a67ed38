"""Display formatting for counts shown in repository cards."""

THOUSAND = 1000
MILLION = THOUSAND * 1000


def format_count(number: int) -> str:
    """
    Compact count: 950 -> "950", 15000 -> "15.0K", 2500000 -> "2.5M".
    """
    if number >= MILLION:
        return f"{number / MILLION:.1f}M"
    if number >= THOUSAND:
        return f"{number / THOUSAND:.1f}K"
    return str(number)
