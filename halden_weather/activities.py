"""Weather-derived activity suggestions and the matching search query."""

from dataclasses import dataclass

from .models import ForecastEntry

WARM_ABOVE = 15
COLD_BELOW = 5
WINDY_ABOVE = 10


@dataclass(frozen=True)
class ActivityPlan:
    messages: list[str]
    query: str


def plan_activities(entry: ForecastEntry, location_query: str) -> ActivityPlan:
    temp = entry.air_temperature
    if entry.precipitation > 0:
        messages = ["☔ Indoor activities recommended"]
        topic = "indoor activities museums cafes"
    elif temp > WARM_ABOVE:
        messages = ["🌞 Great weather for outdoor activities"]
        topic = "hiking parks outdoor activities"
    elif temp < COLD_BELOW:
        messages = ["🧊 Cold weather - indoor or winter activities"]
        topic = "winter activities indoor venues"
    else:
        messages = ["🚶 Mild weather - good for walking or light outdoor activities"]
        topic = "walking trails parks cafes"

    if entry.wind_speed > WINDY_ABOVE:
        messages.append("💨 Windy conditions - sheltered activities preferred")

    return ActivityPlan(messages=messages, query=f"{location_query} {topic}")
