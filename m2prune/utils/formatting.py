"""Human-readable formatting helpers."""


def format_size(bytes_count: int) -> str:
    """Format byte count to human-readable string.

    Args:
        bytes_count: Size in bytes

    Returns:
        Human-readable size string, e.g. ``1.50 KB``
    """
    if bytes_count < 0:
        return "0.00 B"

    count = float(bytes_count)
    for unit in ["B", "KB", "MB", "GB", "TB"]:
        if count < 1024.0 or unit == "TB":
            return f"{count:.2f} {unit}"
        count /= 1024.0
    return f"{count:.2f} TB"
