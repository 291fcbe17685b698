"""Configuration loading for Usage Report."""
