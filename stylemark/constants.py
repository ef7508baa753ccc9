"""Constants and configuration for the stylemark toggler."""

class AppConstants:
    """Central configuration constants for the application."""

    # Style attributes held in the style context
    FONT_STYLE = "font_style"
    FONT_WEIGHT = "font_weight"
    TEXT_DECORATION = "text_decoration"

    # Applied / base values per attribute
    ITALIC = "italic"
    BOLD = "bold"
    UNDERLINE = "underline"
    NORMAL = "normal"
    UNSET = "unset"
    BOLD_WEIGHT_THRESHOLD = 700  # Numeric weights at or above this count as bold

    # Content
    DEFAULT_SAMPLE_TEXT = "Hello from stylemark!"
    INITIAL_STATE_LABEL = "Initial state"

    # Layout
    PANEL_WIDTH = 60  # Width of the centered panel in the terminal UI
    MIN_TERMINAL_WIDTH = 40  # Minimum terminal width required for display
    MIN_TERMINAL_HEIGHT = 12  # Minimum terminal height required for display
    UNDO_MARKER = "↶"  # Prefix for undo-type history rows
    REDO_MARKER = "↷"  # Prefix for redo-type history rows

    # History
    MAX_HISTORY_LIMIT = 10000  # Upper bound accepted for the max_history setting

    # Resize handling
    RESIZE_PIPE_MARKER = b'R'  # Byte written to pipe to signal resize

    # Status messages
    TERMINAL_TOO_SMALL_MESSAGE = "Terminal too small! Need at least {}x{}."
    CURRENT_SIZE_MESSAGE = "Current size: {}x{}."
