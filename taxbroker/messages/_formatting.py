from taxbroker import constants


def format_server_name(server: str) -> str:
    """Server names are stored lower case. This is how we display them."""
    return server.title()


def format_rate_line(location: str, rate: int) -> str:
    """Formats a single location's rate as a list item, flagging reduced rates."""
    reduced = ""
    if rate < constants.REDUCED_RATE_THRESHOLD:
        reduced = " (Reduced)"

    return f"- {location}: {rate}%{reduced}"
