def record_number(record_id: str) -> int:
    """Numeric part of a `#NNNN` id."""
    return int(str(record_id).lstrip("#"))
