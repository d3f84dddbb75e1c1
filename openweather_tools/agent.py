# ABOUTME: Pydantic AI agent definition for the weather assistant.
# ABOUTME: Configures the LLM and system instructions, and imports tool registrations.

from datetime import date

from pydantic_ai import Agent, RunContext
from pydantic_ai.models.openrouter import OpenRouterModel
from pydantic_ai.providers.openrouter import OpenRouterProvider

from openweather_tools.config import load_settings
from openweather_tools.deps import WeatherDeps

settings = load_settings()

model = OpenRouterModel(
    settings.openrouter_model,
    provider=OpenRouterProvider(api_key=settings.openrouter_api_key),
)

agent = Agent(
    model,
    deps_type=WeatherDeps,
    retries=2,
    system_prompt=(
        "You are a weather assistant backed by OpenWeatherMap. You answer questions about current "
        "conditions, short-range forecasts, and active weather alerts for cities worldwide.\n\n"
        "When answering questions:\n"
        "1. Pass the city name and, when the user gives or implies one, an ISO 3166 country code.\n"
        "2. Use the current weather tool for conditions right now.\n"
        "3. Use the forecast tool for the coming days; it covers at most 5 days.\n"
        "4. Use the alerts tool for warnings; an empty list means no alerts are available.\n"
        "5. Use metric units unless the user asks for imperial or Kelvin (standard).\n"
        "6. Missing values are null; say they are unavailable instead of guessing.\n"
        "7. Be concise but informative. Include relevant numbers and units.\n"
    ),
)


@agent.instructions
def add_current_date(ctx: RunContext[WeatherDeps]) -> str:
    """Inject the current date so the LLM knows what 'today' and 'tomorrow' mean."""
    today = date.today()
    return f"Today's date is {today.isoformat()} ({today.strftime('%A')})."


# Import tools module to register @agent.tool decorators
import openweather_tools.tools  # noqa: E402, F401
