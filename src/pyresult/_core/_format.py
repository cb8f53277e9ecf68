def payload_repr(value: object, max_length: int = 120) -> str:
    """Render a payload for an error message, clipped to `max_length` characters.

    A payload whose `__repr__` raises is rendered by its type name instead.
    """
    try:
        text = repr(value)
    except Exception:  # noqa: BLE001
        text = f"<{type(value).__name__} object (repr failed)>"
    if len(text) > max_length:
        return text[: max(max_length - 3, 0)] + "..."
    return text
