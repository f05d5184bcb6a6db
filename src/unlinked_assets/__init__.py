"""Audit a Contentful media library for assets no entry links to."""

__version__ = "0.3.0"
