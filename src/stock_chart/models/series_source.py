"""Series source model for stock-chart."""

from pydantic import BaseModel, Field, field_validator


class SeriesSource(BaseModel):
    """One input series ([[chart.series]] section).

    ``location`` is a local file path or an http(s) URL.
    """

    name: str = Field(
        ...,
        min_length=1,
        description="Series name shown in the legend (e.g., AAPL)",
    )
    location: str = Field(
        ...,
        min_length=1,
        description="CSV path or URL",
    )

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        """Strip surrounding whitespace from the series name."""
        stripped = v.strip()
        if not stripped:
            raise ValueError("series name must not be blank")
        return stripped

    @property
    def is_remote(self) -> bool:
        """True when the location is an http(s) URL."""
        return self.location.startswith(("http://", "https://"))
