class StatsConfig:
    """Default hardcoded configuration for Stats Module."""
    DISPLAY_UTC_OFFSET_HOURS = 9
