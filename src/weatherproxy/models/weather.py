"""Current weather data model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt


class Condition(BaseModel):
    """One weather condition entry (e.g. ``Clouds`` / ``overcast clouds``)."""

    model_config = ConfigDict(frozen=True)

    main: str = Field(default="", strict=True)
    description: str = Field(default="", strict=True)


class MainReadings(BaseModel):
    """The ``main`` block of a current weather response.

    ``temp`` must be a JSON number; numeric strings and NaN/Infinity are
    rejected.
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    temp: StrictFloat | StrictInt = 0.0


class WeatherSnapshot(BaseModel):
    """Subset of the current weather response used by the proxy.

    Only the first entry of ``weather`` is ever read, so an absent or empty
    list is rejected here instead of failing later during formatting.
    """

    model_config = ConfigDict(frozen=True)

    weather: list[Condition] = Field(min_length=1)
    main: MainReadings = MainReadings()

    @property
    def primary_condition(self) -> Condition:
        return self.weather[0]

    @property
    def temperature(self) -> float:
        """Current temperature in degrees Celsius."""
        return float(self.main.temp)
