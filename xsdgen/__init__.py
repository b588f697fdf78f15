"""Generate Go struct declarations from XML schema trees."""

__version__ = "0.1.0"
