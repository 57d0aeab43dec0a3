"""Domain enums."""

from enum import Enum


class TravelMode(str, Enum):
    DRIVING = "driving"
    BICYCLING = "bicycling"
    TRANSIT = "transit"
    WALKING = "walking"
