from enum import Enum


class Granularity(Enum):
    """Time resolution of a forecast view.

    Values match the section names of the Open-Meteo response.
    """

    CURRENT = "current"  # single point in time
    HOURLY = "hourly"
    DAILY = "daily"
