"""
Widget configuration for the menu.
Word lists, storage keys and display timings.
"""


class WidgetConfig:
    """
    Configuration class for the smaller widgets.
    Change these values to customise the menu!
    """

    # ==================== HANGMAN SETTINGS ====================
    HANGMAN_MAX_MISSES = 6
    HANGMAN_WORDS = (
        "python", "keyboard", "calculator", "variable", "function",
        "notebook", "library", "compiler", "terminal", "algorithm",
        "database", "network", "browser", "package", "element",
    )

    # ==================== TO-DO SETTINGS ====================
    TODO_STORAGE_KEY = "todos"
    TODO_MAX_LENGTH = 120

    # ==================== THEME SETTINGS ====================
    DARK_MODE_STORAGE_KEY = "darkMode"

    # ==================== NOTIFICATION SETTINGS ====================
    TOAST_DURATION_MS = 2500
    TOAST_QUEUE_LIMIT = 20

    # ==================== ASCII TABLE SETTINGS ====================
    ASCII_FIRST = 0
    ASCII_LAST = 127
