"""A small side-scrolling platformer and the pygame engine it runs on."""

__version__ = "0.1.0"