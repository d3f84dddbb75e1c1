# ABOUTME: OpenWeatherMap tool adapter package.
# ABOUTME: Exposes current weather, forecast, and alerts lookups as agent/MCP tools.
