"""strapictl - command line helpers for Strapi projects."""

__version__ = "0.1.0"
