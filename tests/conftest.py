"""Test configuration and fixtures."""

import logfire

# Spans and events are recorded locally only; nothing is printed or sent
logfire.configure(send_to_logfire=False, console=False)
