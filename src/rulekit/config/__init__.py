"""Configuration layer — message catalog, option models, settings, logging."""
