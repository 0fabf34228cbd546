from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Redis
    redis_url: str = "redis://localhost:6379/0"

    # Amadeus (hotels + flights)
    amadeus_client_id: str = ""
    amadeus_client_secret: str = ""
    amadeus_base_url: str = "https://test.api.amadeus.com"

    # Yelp Fusion (restaurants)
    yelp_api_key: str = ""
    yelp_base_url: str = "https://api.yelp.com/v3"

    # Rome2Rio (local transport)
    rome2rio_api_key: str = ""
    rome2rio_base_url: str = "https://free.rome2rio.com/api/1.4/json"

    # OpenWeatherMap
    openweather_api_key: str = ""
    openweather_base_url: str = "https://api.openweathermap.org/data/2.5"
    weather_cache_ttl: int = 1800

    # ExchangeRate-API
    exchange_api_key: str = ""
    exchange_base_url: str = "https://v6.exchangerate-api.com/v6"
    exchange_cache_ttl: int = 3600

    # Nominatim geocoding
    nominatim_base_url: str = "https://nominatim.openstreetmap.org"
    nominatim_user_agent: str = "tripwise/0.1"

    # Recommendation pipeline
    recommendation_timeout_seconds: float = 20.0
    provider_timeout_seconds: float = 15.0
    use_mock_providers: bool = False
    profile_catalog_path: str = ""

    # CORS
    cors_origins: str = "http://localhost:5173"

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",")]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()
