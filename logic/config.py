"""
Configuration for the TicTacToe game logic.
Change these values to tune how the computer opponent searches.
"""


class LogicConfig:
    """
    Configuration class for the search settings.
    """

    # ==================== SEARCH SETTINGS ====================
    # Alpha-beta pruning gives the same payoff with far fewer positions,
    # but may pick a different move among equally good ones
    USE_PRUNING = False

    # Log how many positions each AI move looked at. Logged at INFO, so
    # ConsoleConfig.LOG_LEVEL must be lowered to INFO for the line to show
    LOG_SEARCH_STATS = True
