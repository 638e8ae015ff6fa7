"""Adapter-side helpers: card token normalisation, configuration, logging."""
