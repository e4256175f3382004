from soundtherapy.sources.garmin.auth import GarminAuth
from soundtherapy.sources.garmin.client import GarminClient
from soundtherapy.sources.garmin.mappers import map_biometrics
from soundtherapy.sources.garmin.source import GarminSource

__all__ = [
    "GarminAuth",
    "GarminClient",
    "GarminSource",
    "map_biometrics",
]
