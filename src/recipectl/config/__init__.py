"""Configuration layer — recipectl.toml models, discovery, settings, logging."""
