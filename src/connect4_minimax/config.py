"""
Configuration for Connect Four minimax play.
"""


# Search Configuration
SEARCH_CONFIG = {
    'max_depth': 4,                     # Plies searched by computer players
    'strategy': 'alphabeta',            # 'minimax' or 'alphabeta'
}

# Evaluation Configuration
EVAL_CONFIG = {
    'center_weight': 3,                 # Per piece in the middle column
    'win_score': 1_000_000,             # Four in a window
    'three_score': 5,                   # Three + one empty
    'two_score': 2,                     # Two + two empty
}

# Play Configuration (CLI defaults)
PLAY_CONFIG = {
    'red': 'human',                     # Red moves first
    'yellow': 'alphabeta',
    'seed': None,                       # RNG seed for random players
    'num_games': 10,                    # Games per match in --games mode
}
