"""Test configuration and fixtures."""

import logfire

# Route spans and events nowhere; the app and services log through logfire
logfire.configure(send_to_logfire=False, console=False)
