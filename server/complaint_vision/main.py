import logging
from typing import Optional

from fastapi import FastAPI

from .api.v1.endpoints import analyze, health
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .core.middleware import setup_middleware
from .services.ai_models.language import PromptWrapper, QwenVisionAdapter
from .services.ai_models.language.prompts import get_prompts_manager
from .services.analysis_service import AnalysisService

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
  """FastAPI application factory."""
  settings = settings or default_settings
  setup_logging(settings.log_level)

  app = FastAPI(title=settings.app_name, version=settings.version)

  if not settings.is_configured:
    logger.error(
        "OPENROUTER_API_KEY is not set. Analysis requests will be refused "
        "with a 500 until it is configured."
    )

  language_model = QwenVisionAdapter(settings.provider)
  prompt_wrapper = PromptWrapper(
      prompts_manager=get_prompts_manager(settings.prompts.DIR),
      prompts_scene=settings.prompts.SCENE,
      prompts_template=settings.prompts.TEMPLATE,
  )
  app.state.settings = settings
  app.state.analysis_service = AnalysisService(language_model, prompt_wrapper)

  # CORS headers and preflight
  setup_middleware(app)

  # Health first: the analysis route matches every path
  app.include_router(health.router, prefix="/api/v1")
  app.include_router(analyze.router)

  @app.on_event("startup")
  async def startup_event():
    print("\n" + "=" * 60)
    print(f"   Service: {settings.app_name} {settings.version}")
    print(f"   Listening: http://{settings.host}:{settings.port}")
    print(f"   Model: {settings.provider.MODEL_NAME} ({settings.provider.BASE_URL})")
    print(f"   API key: {'configured' if settings.is_configured else 'MISSING'}")
    print(f"   Health check: http://{settings.host}:{settings.port}/api/v1/health")
    print("=" * 60 + "\n")

  return app


app = create_app()


if __name__ == "__main__":
  import uvicorn

  uvicorn.run(
      "complaint_vision.main:app",
      host=default_settings.host,
      port=default_settings.port,
      reload=default_settings.reload,
  )
