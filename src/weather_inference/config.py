"""
Configuration settings for Weather Inference Layer.

All settings are loaded from environment variables with sensible defaults.
Use .env file for local development.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
    
    # === Application ===
    APP_NAME: str = "Weather Inference Layer"
    APP_VERSION: str = "0.1.0"
    ENVIRONMENT: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    
    # === Inference Engine ===
    INFERENCE_ENGINE: str = "tflite"  # tflite, onnx or stub
    MODEL_PATH: str = "models/Weather_predictor.tflite"
    MODEL_NUM_THREADS: int = 1
    ONNX_PROVIDERS: list[str] = ["CPUExecutionProvider"]
    STUB_SCORES: list[float] = [0.0, 0.0, 0.0, 1.0, 0.0]  # Only used by the stub engine
    
    # === API ===
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000
    
    # === Monitoring ===
    PROMETHEUS_ENABLED: bool = True


# Global settings instance
settings = Settings()
