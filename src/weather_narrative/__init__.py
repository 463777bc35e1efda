"""Weather Narrative - plain-English weather pages from OpenWeatherMap observations."""

__version__ = "0.1.0"

from weather_narrative.compute.narrative import assemble
from weather_narrative.models import Narrative, WeatherObservation

__all__ = ["assemble", "Narrative", "WeatherObservation"]
