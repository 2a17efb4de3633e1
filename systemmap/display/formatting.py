def format_number(value: float) -> str:
    """Compact form of a count or credit value: 1500 gives "1.5K", 2300000 gives "2.3M"."""
    if value >= 1_000_000:
        return f"{value / 1_000_000:.1f}M"
    if value >= 1_000:
        return f"{value / 1_000:.1f}K"
    return f"{value:.0f}"
