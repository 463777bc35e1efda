import os

# OpenWeatherMap
OPENWEATHER_API_KEY = os.environ.get("OPENWEATHER_API_KEY", "")
CURRENT_WEATHER_URL = "https://api.openweathermap.org/data/2.5/weather"
HISTORY_URL = "https://history.openweathermap.org/data/2.5/history/city"

# "standard" returns Kelvin, "metric" returns Celsius
OPENWEATHER_UNITS = os.environ.get("OPENWEATHER_UNITS", "standard")

# Seconds
REQUEST_TIMEOUT = 30
HISTORY_LOOKBACK_SECONDS = 24 * 60 * 60

# Comparison band edges (Celsius), ascending, shared by both sides of zero:
#   (-inf,-e3) [-e3,-e2) [-e2,-e1) [-e1,e1) [e1,e2) [e2,e3) [e3,+inf)
TIGHT_BAND_EDGES = (1.0, 2.5, 5.0)
WIDE_BAND_EDGES = (1.0, 5.0, 10.0)
BAND_EDGES = TIGHT_BAND_EDGES

# "hour" (four-way time of day) or "daylight" (day/night from icon token)
FRAMING_POLICY = "hour"

# Server
DEFAULT_PORT = 8080
