# modules/exercise/config.py

class ExerciseDefaultConfig:
    """Fallbacks when the app config does not set them."""
    ANSWER_WHITESPACE_MODE = 'collapse'
    WORKSPACE_SESSION_KEY = 'workspace_id'
    # Most learner workspaces kept in memory; least recently used go first
    WORKSPACE_REGISTRY_SIZE = 16
