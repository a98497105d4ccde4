# Vulture whitelist - False positives for vulture dead code detection
#
# These are not dead code - they are:
# 1. Typer callback parameters (used by framework)
# 2. Pydantic hooks and validators (called by pydantic-settings)

# Typer callback parameters - used by Typer framework for CLI options
version  # main.py - Typer callback parameter

# Pydantic settings hooks
model_config  # utils/config.py - read by pydantic-settings
settings_customise_sources  # utils/config.py - source ordering hook
_check_language  # utils/config.py - field validator
_check_log_level  # utils/config.py - field validator
_check_default_direction  # utils/config.py - model validator
