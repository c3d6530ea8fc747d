# Training environment configuration

# Environment settings
ENV_CONFIG = {
    'max_steps': 5000,   # Truncate episodes after this many ticks
    'ticks_per_step': 1,  # Game ticks simulated per env step
}

# Observation layout
OBS_CONFIG = {
    'submarine_features': 4,  # x, y, velocity, lives
    'max_corals': 4,          # Nearest corals ahead of the submarine
    'max_fish': 3,            # Nearest fish ahead of the submarine
    'entity_features': 2,     # dx, y
    'max_velocity': 20.0,     # Velocity normalization bound
}

# Reward shaping
REWARD_CONFIG = {
    'survival_bonus': 0.01,    # Per step while running
    'score_multiplier': 1.0,   # Per point of score gained
    'life_lost_penalty': -1.0,
    'game_over_penalty': -5.0,
}
