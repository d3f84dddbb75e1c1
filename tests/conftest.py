# ABOUTME: Shared test fixtures for the weather tool adapter test suite.
# ABOUTME: Blocks real LLM calls and provides placeholder credentials for module-level settings.

import os

import pydantic_ai.models

# Prevent accidental LLM calls during testing
pydantic_ai.models.ALLOW_MODEL_REQUESTS = False

# Modules that load settings at import time need credentials present
os.environ.setdefault("OPENWEATHER_API_KEY", "test-openweather-key")
os.environ.setdefault("OPENROUTER_API_KEY", "test-openrouter-key")
