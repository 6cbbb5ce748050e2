"""Shared application settings read from environment variables."""

import os

LOG_LEVEL: str = os.environ.get('LOG_LEVEL', 'INFO').upper()

# Number of settlement recommendations returned when a request does not ask
# for a specific count.
DEFAULT_TOP_N: int = int(os.environ.get('DEFAULT_TOP_N', '5'))

# Port the advisor listens on when started directly.
PORT: int = int(os.environ.get('PORT', '8000'))
