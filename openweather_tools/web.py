# ABOUTME: ASGI web entry point for the weather assistant chat UI.
# ABOUTME: Creates a Starlette app via agent.to_web() with a small model selection dropdown.

from openweather_tools.agent import agent, settings
from openweather_tools.deps import create_deps

# The agent's default model is always included automatically by to_web().
# The string shorthand "openrouter:model_name" reads OPENROUTER_API_KEY from env.
_models: dict[str, str] = {
    "Ministral 14B": "openrouter:mistralai/ministral-14b-2512",
    "Claude Haiku 4.5": "openrouter:anthropic/claude-haiku-4.5",
}

if f"openrouter:{settings.openrouter_model}" not in _models.values():
    _label = settings.openrouter_model.split("/")[-1].replace("-", " ").title()
    _models[f"{_label} (Default)"] = f"openrouter:{settings.openrouter_model}"

app = agent.to_web(
    deps=create_deps(settings),
    models=_models,
)
