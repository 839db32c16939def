"""Concrete host collaborators: template rendering, properties and identity."""
