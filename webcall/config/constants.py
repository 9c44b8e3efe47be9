"""
Constants and configuration values used throughout the application.

This module defines constants shared by the relay service and the client
session controller, so both sides agree on paths, defaults and the audio
parameters handed to the provider runtime.
"""

# Logger name used throughout the application
LOGGER_NAME = "webcall"

# Retell AI provider API
DEFAULT_RETELL_BASE_URL = "https://api.retellai.com"
RETELL_CREATE_WEB_CALL_PATH = "/v2/create-web-call"

# Relay server defaults
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080
DEFAULT_API_PREFIX = "/api"
CREATE_WEB_CALL_PATH = "/create-web-call"
HEALTH_PATH = "/health"

# Client defaults
DEFAULT_RELAY_URL = "http://localhost:8080"

# Media session parameters passed to the provider runtime
DEFAULT_SAMPLE_RATE = 24000
DEFAULT_CAPTURE_DEVICE_ID = "default"

# Provider runtime event names
EVENT_CALL_STARTED = "call_started"
EVENT_CALL_ENDED = "call_ended"
EVENT_AGENT_START_TALKING = "agent_start_talking"
EVENT_AGENT_STOP_TALKING = "agent_stop_talking"
EVENT_UPDATE = "update"
EVENT_ERROR = "error"

# User-facing error messages
MESSAGE_AGENT_ID_REQUIRED = "agent_id is required"
MESSAGE_INVALID_BODY = "Invalid request body"
MESSAGE_PROVIDER_FAILURE = "Failed to create web call"
MESSAGE_INTERNAL_ERROR = "Internal server error"
MESSAGE_REGISTER_FAILED = "Failed to register call"
MESSAGE_START_FAILED = "Failed to start call"
MESSAGE_RUNTIME_ERROR = "An error occurred"
