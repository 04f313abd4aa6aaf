from complaint_vision.core.config import ProviderConfig, Settings


def test_defaults_point_at_openrouter_qwen():
    settings = Settings(openrouter_api_key="abc")

    assert settings.provider.API_KEY == "abc"
    assert settings.provider.BASE_URL == "https://openrouter.ai/api"
    assert settings.provider.MODEL_NAME == "qwen/qwen-2.5-vl-7b-instruct"
    assert settings.prompts.SCENE == "complaint_analysis"
    assert settings.is_configured


def test_api_key_from_environment(monkeypatch):
    monkeypatch.setenv("OPENROUTER_API_KEY", "from-env")

    assert Settings().provider.API_KEY == "from-env"


def test_blank_key_is_not_configured():
    assert not Settings(openrouter_api_key="").is_configured


def test_explicit_provider_is_kept():
    provider = ProviderConfig(API_KEY="k", MODEL_NAME="some/other-model")

    settings = Settings(provider=provider)

    assert settings.provider.MODEL_NAME == "some/other-model"
    assert settings.provider.API_KEY == "k"
