"""Rich theme and icons for m2prune CLI output."""

from rich.console import Console
from rich.theme import Theme


M2PRUNE_THEME = Theme(
    {
        "success": "bold green",
        "warning": "bold yellow",
        "info": "bold blue",
    }
)


class Icons:
    """Standardized icons for different message types."""

    SUCCESS = "✅"
    WARNING = "⚠️"
    INFO = "ℹ️"

    _TEXT_FALLBACKS = {
        "SUCCESS": "[OK]",
        "WARNING": "[WARN]",
        "INFO": "[INFO]",
    }

    @classmethod
    def get_icon(cls, icon_name: str, icon_mode: str = "emoji") -> str:
        """Get icon based on the specified mode.

        Args:
            icon_name: Name of the icon (e.g., "SUCCESS", "WARNING")
            icon_mode: Icon mode - "emoji" or "text"

        Returns:
            The appropriate icon based on mode
        """
        if icon_mode == "emoji":
            return getattr(cls, icon_name, "")
        return cls._TEXT_FALLBACKS.get(icon_name, f"[{icon_name}]")


class ThemedConsole:
    """Console wrapper with the m2prune theme applied."""

    def __init__(self, icon_mode: str = "emoji", console: Console | None = None) -> None:
        self.console = console or Console(theme=M2PRUNE_THEME, highlight=False)
        self.icon_mode = icon_mode

    def _print(self, icon_name: str, message: str, style: str) -> None:
        icon = Icons.get_icon(icon_name, self.icon_mode)
        text = f"{icon} {message}" if icon else message
        self.console.print(text, style=style, markup=False, soft_wrap=True)

    def print_success(self, message: str) -> None:
        self._print("SUCCESS", message, "success")

    def print_warning(self, message: str) -> None:
        self._print("WARNING", message, "warning")

    def print_info(self, message: str) -> None:
        self._print("INFO", message, "info")

    def print_plain(self, message: str) -> None:
        self.console.print(message, markup=False, highlight=False, soft_wrap=True)


def get_themed_console(icon_mode: str = "emoji") -> ThemedConsole:
    """Get a themed console instance."""
    return ThemedConsole(icon_mode=icon_mode)
