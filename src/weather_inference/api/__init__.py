"""
FastAPI API routes and endpoints.

- routes.py: POST /predict, GET /categories, GET /health
- dependencies.py: Settings and predictor singletons
- models.py: API-specific request/response models
- error_handlers.py: Exception handlers for structured error responses
- middleware.py: Request id tracing
"""

from weather_inference.api import dependencies, error_handlers, models
from weather_inference.api.routes import router

__all__ = [
    "router",
    "dependencies",
    "error_handlers",
    "models",
]
