"""ecoroute — eco-scored route options between two addresses."""

__version__ = "1.0.0"
