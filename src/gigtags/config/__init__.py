"""Configuration: TOML section models, settings, and logging."""
