from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator, Field
from typing import List, Optional, Union


COLOR_CODES = ("W", "Y", "G", "B", "R", "O")


class Settings(BaseSettings):
    """Settings for the cube engine and its HTTP service"""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore"  # Ignore extra fields from environment
    )

    # Application
    app_name: str = "nxcube"
    app_version: str = "0.1.0"
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    port: int = Field(default=8000, alias="PORT")

    # Cube defaults
    default_cube_size: int = Field(default=3, alias="DEFAULT_CUBE_SIZE")
    max_cube_size: int = Field(default=20, alias="MAX_CUBE_SIZE")  # HTTP guard only
    blank_fill_color: str = Field(default="W", alias="BLANK_FILL_COLOR")

    # Scrambler
    default_scramble_length: int = Field(default=20, alias="DEFAULT_SCRAMBLE_LENGTH")
    scramble_seed: Optional[int] = Field(default=None, alias="SCRAMBLE_SEED")
    max_moves: int = Field(default=1000, alias="MAX_MOVES")  # HTTP guard only

    # CORS
    allowed_origins: Union[str, List[str]] = Field(default="", alias="ALLOWED_ORIGINS")

    @field_validator("blank_fill_color", mode="before")
    @classmethod
    def normalize_fill_color(cls, v):
        code = str(v).strip().upper()
        if code not in COLOR_CODES:
            raise ValueError(f"blank_fill_color must be one of {', '.join(COLOR_CODES)}")
        return code

    @field_validator("default_cube_size")
    @classmethod
    def check_default_size(cls, v):
        if v < 2:
            raise ValueError("default_cube_size must be at least 2")
        return v

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v):
        if v is None or v == "":
            return []
        if isinstance(v, str):
            return [i.strip() for i in v.split(",") if i.strip()]
        elif isinstance(v, list):
            return v
        return []


# Create settings instance
settings = Settings()
