"""Configuration: section models, settings resolution and log routing."""
