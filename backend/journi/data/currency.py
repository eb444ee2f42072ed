"""Currency display helpers shared by the itinerary prompt and the PDF export."""


def format_price(amount) -> str:
    """Format a USD amount for display, rounded to whole dollars: 1500 -> "$1,500"."""
    return f"${round(float(amount or 0)):,}"
