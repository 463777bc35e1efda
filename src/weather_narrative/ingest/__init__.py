"""OpenWeatherMap fetching and response parsing."""
