"""Parameter models for the Open-Meteo tools.

Every tool validates its raw arguments into one of these frozen models before
anything is sent to the API. The JSON schema advertised in ``tools/list`` is
generated from the same model.
"""
from __future__ import annotations

from datetime import date
from typing import Annotated, Any, Dict, List, Literal, Mapping, Optional, Tuple, Type, TypeVar, get_args

import pydantic
from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    StringConstraints,
    ValidationInfo,
    field_validator,
    model_validator,
)

from .base import ValidationError


def _split_csv(value: Any) -> Any:
    if isinstance(value, str):
        return [item.strip() for item in value.split(",") if item.strip()]
    return value


def _as_list(value: Any) -> Any:
    if isinstance(value, str):
        return _split_csv(value)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return [value]
    return value


def _check_calendar_date(value: str) -> str:
    date.fromisoformat(value)
    return value


Latitude = Annotated[float, Field(ge=-90, le=90, description="Latitude in decimal degrees (WGS84).")]
Longitude = Annotated[float, Field(ge=-180, le=180, description="Longitude in decimal degrees (WGS84).")]

DateString = Annotated[
    str,
    StringConstraints(pattern=r"^\d{4}-\d{2}-\d{2}$"),
    AfterValidator(_check_calendar_date),
]

VariableName = Annotated[str, StringConstraints(pattern=r"^[a-z0-9_]+$")]
VariableList = Annotated[
    Optional[Annotated[List[VariableName], Field(min_length=1)]],
    BeforeValidator(_split_csv),
]

ModelName = Annotated[str, StringConstraints(pattern=r"^[A-Za-z0-9_]+$")]
ModelList = Annotated[
    Optional[Annotated[List[ModelName], Field(min_length=1)]],
    BeforeValidator(_split_csv),
]

TemperatureUnit = Literal["celsius", "fahrenheit"]
WindSpeedUnit = Literal["kmh", "ms", "mph", "kn"]
PrecipitationUnit = Literal["mm", "inch"]
TimeFormat = Literal["iso8601", "unixtime"]
CellSelection = Literal["land", "sea", "nearest"]

AirQualityVariable = Literal[
    "pm10",
    "pm2_5",
    "carbon_monoxide",
    "carbon_dioxide",
    "nitrogen_dioxide",
    "sulphur_dioxide",
    "ozone",
    "aerosol_optical_depth",
    "dust",
    "uv_index",
    "uv_index_clear_sky",
    "ammonia",
    "methane",
    "alder_pollen",
    "birch_pollen",
    "grass_pollen",
    "mugwort_pollen",
    "olive_pollen",
    "ragweed_pollen",
    "european_aqi",
    "european_aqi_pm2_5",
    "european_aqi_pm10",
    "european_aqi_nitrogen_dioxide",
    "european_aqi_ozone",
    "european_aqi_sulphur_dioxide",
    "us_aqi",
    "us_aqi_pm2_5",
    "us_aqi_pm10",
    "us_aqi_nitrogen_dioxide",
    "us_aqi_ozone",
    "us_aqi_sulphur_dioxide",
    "us_aqi_carbon_monoxide",
]

MarineHourlyVariable = Literal[
    "wave_height",
    "wave_direction",
    "wave_period",
    "wind_wave_height",
    "wind_wave_direction",
    "wind_wave_period",
    "wind_wave_peak_period",
    "swell_wave_height",
    "swell_wave_direction",
    "swell_wave_period",
    "swell_wave_peak_period",
    "ocean_current_velocity",
    "ocean_current_direction",
    "sea_surface_temperature",
    "sea_level_height_msl",
]

MarineDailyVariable = Literal[
    "wave_height_max",
    "wave_direction_dominant",
    "wave_period_max",
    "wind_wave_height_max",
    "wind_wave_direction_dominant",
    "wind_wave_period_max",
    "wind_wave_peak_period_max",
    "swell_wave_height_max",
    "swell_wave_direction_dominant",
    "swell_wave_period_max",
    "swell_wave_peak_period_max",
]

FloodVariable = Literal[
    "river_discharge",
    "river_discharge_mean",
    "river_discharge_median",
    "river_discharge_max",
    "river_discharge_min",
    "river_discharge_p25",
    "river_discharge_p75",
]


def _variable_list(variable: Any) -> Any:
    return Annotated[Optional[Annotated[List[variable], Field(min_length=1)]], BeforeValidator(_split_csv)]


AirQualityList = _variable_list(AirQualityVariable)
MarineHourlyList = _variable_list(MarineHourlyVariable)
MarineDailyList = _variable_list(MarineDailyVariable)
FloodList = _variable_list(FloodVariable)


class BaseParams(BaseModel):
    """Common behaviour of every validated parameter object."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    @field_validator("*", mode="before")
    @classmethod
    def _reject_booleans(cls, value: Any, info: ValidationInfo) -> Any:
        # true/false only validate in boolean fields
        annotation = cls.model_fields[info.field_name].annotation
        if annotation is bool or bool in get_args(annotation):
            return value
        items = value if isinstance(value, (list, tuple)) else [value]
        if any(isinstance(item, bool) for item in items):
            raise ValueError("expected a number or string, got a boolean")
        return value

    @model_validator(mode="after")
    def _check_date_range(self) -> "BaseParams":
        start = getattr(self, "start_date", None)
        end = getattr(self, "end_date", None)
        if start and end and start > end:
            raise ValueError("start_date must not be after end_date")
        return self

    def to_query(self) -> Dict[str, Any]:
        """Render the model as Open-Meteo query parameters."""

        query: Dict[str, Any] = {}
        for key, value in self.model_dump(exclude_none=True, by_alias=True).items():
            if isinstance(value, bool):
                query[key] = "true" if value else "false"
            elif isinstance(value, (list, tuple)):
                query[key] = ",".join(str(item) for item in value)
            else:
                query[key] = value
        return query


class LocationParams(BaseParams):
    latitude: Latitude
    longitude: Longitude


class WeatherParams(LocationParams):
    """Variables and units shared by the forecast-style endpoints."""

    hourly: VariableList = Field(
        None,
        description="Hourly variables, e.g. temperature_2m, relative_humidity_2m, precipitation, wind_speed_10m.",
    )
    daily: VariableList = Field(
        None,
        description="Daily aggregates, e.g. temperature_2m_max, temperature_2m_min, precipitation_sum, sunrise.",
    )
    temperature_unit: TemperatureUnit = "celsius"
    wind_speed_unit: WindSpeedUnit = "kmh"
    precipitation_unit: PrecipitationUnit = "mm"
    timeformat: TimeFormat = "iso8601"
    timezone: Optional[str] = Field(
        None,
        description="IANA timezone such as Europe/Berlin, or 'auto' to resolve from the coordinates.",
    )
    models: ModelList = Field(None, description="Weather models to query, e.g. icon_seamless, gfs_seamless.")
    cell_selection: Optional[CellSelection] = None
    elevation: Optional[float] = Field(None, description="Elevation override in metres used for downscaling.")


class ForecastParams(WeatherParams):
    current: VariableList = Field(None, description="Variables for current conditions, e.g. temperature_2m.")
    current_weather: Optional[bool] = Field(None, description="Include the legacy current_weather block.")
    past_days: Optional[int] = Field(None, ge=0, le=92)
    forecast_days: Optional[int] = Field(None, ge=0, le=16)
    start_date: Optional[DateString] = None
    end_date: Optional[DateString] = None


class ArchiveParams(WeatherParams):
    start_date: DateString = Field(..., description="First day of the period (YYYY-MM-DD).")
    end_date: DateString = Field(..., description="Last day of the period (YYYY-MM-DD).")


class EnsembleParams(WeatherParams):
    models: Annotated[List[ModelName], BeforeValidator(_split_csv)] = Field(
        ...,
        min_length=1,
        description="Ensemble models, e.g. icon_seamless, gfs025, ecmwf_ifs025.",
    )
    past_days: Optional[int] = Field(None, ge=0, le=92)
    forecast_days: Optional[int] = Field(None, ge=1, le=35)
    start_date: Optional[DateString] = None
    end_date: Optional[DateString] = None


class ClimateParams(LocationParams):
    start_date: DateString = Field(..., description="First day of the projection (YYYY-MM-DD, 1950 onwards).")
    end_date: DateString = Field(..., description="Last day of the projection (YYYY-MM-DD, up to 2050).")
    models: Annotated[List[ModelName], BeforeValidator(_split_csv)] = Field(
        ...,
        min_length=1,
        description="CMIP6 models, e.g. EC_Earth3P_HR, MRI_AGCM3_2_S, MPI_ESM1_2_XR.",
    )
    daily: VariableList = Field(None, description="Daily variables, e.g. temperature_2m_max, precipitation_sum.")
    temperature_unit: TemperatureUnit = "celsius"
    wind_speed_unit: WindSpeedUnit = "kmh"
    precipitation_unit: PrecipitationUnit = "mm"
    timeformat: TimeFormat = "iso8601"
    disable_bias_correction: Optional[bool] = None


class AirQualityParams(LocationParams):
    hourly: AirQualityList = None
    current: AirQualityList = None
    domains: Literal["auto", "cams_europe", "cams_global"] = "auto"
    timeformat: TimeFormat = "iso8601"
    timezone: Optional[str] = None
    past_days: Optional[int] = Field(None, ge=0, le=92)
    forecast_days: Optional[int] = Field(None, ge=1, le=7)
    start_date: Optional[DateString] = None
    end_date: Optional[DateString] = None
    cell_selection: Optional[CellSelection] = None


class MarineParams(LocationParams):
    hourly: MarineHourlyList = None
    daily: MarineDailyList = None
    current: MarineHourlyList = None
    timeformat: TimeFormat = "iso8601"
    timezone: Optional[str] = None
    past_days: Optional[int] = Field(None, ge=0, le=92)
    forecast_days: Optional[int] = Field(None, ge=1, le=16)
    start_date: Optional[DateString] = None
    end_date: Optional[DateString] = None
    cell_selection: Optional[CellSelection] = None


class FloodParams(LocationParams):
    daily: FloodList = None
    timeformat: TimeFormat = "iso8601"
    timezone: Optional[str] = None
    past_days: Optional[int] = Field(None, ge=0, le=92)
    forecast_days: Optional[int] = Field(None, ge=1, le=210)
    start_date: Optional[DateString] = None
    end_date: Optional[DateString] = None
    ensemble: Optional[bool] = Field(None, description="Return all 50 ensemble members.")
    cell_selection: Optional[CellSelection] = None


class ElevationParams(BaseParams):
    latitude: Annotated[List[Latitude], BeforeValidator(_as_list)] = Field(
        ..., min_length=1, max_length=100, description="Up to 100 latitudes."
    )
    longitude: Annotated[List[Longitude], BeforeValidator(_as_list)] = Field(
        ..., min_length=1, max_length=100, description="Longitudes matching the latitudes one to one."
    )

    @model_validator(mode="after")
    def _check_pairs(self) -> "ElevationParams":
        if len(self.latitude) != len(self.longitude):
            raise ValueError("latitude and longitude must contain the same number of coordinates")
        return self


class GeocodingParams(BaseParams):
    name: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)] = Field(
        ..., description="Place name or postal code to search for."
    )
    count: int = Field(10, ge=1, le=100)
    language: Annotated[str, StringConstraints(pattern=r"^[a-z]{2}$")] = "en"
    country_code: Optional[Annotated[str, StringConstraints(pattern=r"^[A-Za-z]{2}$")]] = Field(
        None, alias="countryCode", description="ISO-3166-1 alpha2 country filter."
    )
    format: Literal["json"] = "json"


ParamsT = TypeVar("ParamsT", bound=BaseParams)


def _expected_type(prop: Mapping[str, Any]) -> str:
    if "enum" in prop:
        return "one of " + ", ".join(str(option) for option in prop["enum"])
    if "const" in prop:
        return repr(prop["const"])
    if prop.get("type") == "array":
        return f"array of {_expected_type(prop.get('items', {}))}"
    if "type" in prop:
        return str(prop["type"])
    if "anyOf" in prop:
        options = [_expected_type(option) for option in prop["anyOf"] if option.get("type") != "null"]
        return " or ".join(options) or "value"
    return "value"


def _describe_errors(model: Type[BaseParams], exc: pydantic.ValidationError) -> List[Tuple[str, str]]:
    properties = model.model_json_schema().get("properties", {})
    issues: List[Tuple[str, str]] = []
    for error in exc.errors(include_url=False):
        loc = error.get("loc", ())
        path = ".".join(str(part) for part in loc) or "arguments"
        if error["type"] == "missing" and loc:
            expected = _expected_type(properties.get(str(loc[0]), {}))
            message = f"required field missing (expected {expected})"
        else:
            message = error["msg"]
        issues.append((path, message))
    return issues


def validate_arguments(model: Type[ParamsT], raw: Optional[Mapping[str, Any]]) -> ParamsT:
    """Validate untrusted tool arguments against ``model``.

    Returns the fully populated (defaults applied) model instance, or raises
    :class:`ValidationError` listing every violated constraint.
    """

    if raw is None:
        raw = {}
    if not isinstance(raw, Mapping):
        raise ValidationError([("arguments", f"expected an object, got {type(raw).__name__}")])
    try:
        return model.model_validate(dict(raw))
    except pydantic.ValidationError as exc:
        raise ValidationError(_describe_errors(model, exc)) from exc


__all__ = [
    "AirQualityParams",
    "ArchiveParams",
    "BaseParams",
    "ClimateParams",
    "ElevationParams",
    "EnsembleParams",
    "FloodParams",
    "ForecastParams",
    "GeocodingParams",
    "LocationParams",
    "MarineParams",
    "WeatherParams",
    "validate_arguments",
]
