from decimal import Decimal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # App
    app_title: str = "Property Comparator"
    debug: bool = False
    log_level: str = "INFO"

    # Decision engine
    # Two strategies whose final patrimonies differ by no more than this
    # fraction of the top patrimony are reported as comparable.
    comparable_threshold: Decimal = Decimal("0.05")

    # Annual rates at or below this make (1 + r) <= 0 and break compounding
    degenerate_rate_floor_pct: Decimal = Decimal("-100")


settings = Settings()
