"""User-facing configuration documentation for the host's settings UI."""

from __future__ import annotations

import json
from dataclasses import dataclass

from .parser import CONTEXT_SERVER_ID, ContextServerSettings, default_settings_document

INSTALLATION_INSTRUCTIONS = f"""
## Serena Context Server Setup

1. **Install Python 3.11 or 3.12** (required):
   ```bash
   brew install python@3.11
   python3.11 --version
   ```

2. **Install Serena Agent**:
   ```bash
   python3.11 -m pip install serena-agent
   ```

3. **Configure in your editor's settings.json**:
   ```json
   {{
     "context_servers": {{
       "{CONTEXT_SERVER_ID}": {{
         "source": "extension",
         "enabled": true,
         "settings": {{
           "python_executable": "/opt/homebrew/bin/python3.11"
         }}
       }}
     }}
   }}
   ```

The extension will automatically detect Python 3.11/3.12 installations, but you can
specify a custom path using the `python_executable` setting. Extra variables for the
Serena process go in the `environment` setting.
"""


@dataclass(frozen=True)
class ContextServerConfiguration:
    """Static configuration documents handed to the host."""

    installation_instructions: str
    default_settings: str
    settings_schema: str


def settings_schema() -> str:
    """JSON Schema for ContextServerSettings, as text."""
    return json.dumps(ContextServerSettings.model_json_schema(), indent=2)


def describe_configuration() -> ContextServerConfiguration:
    """Build the configuration documents for the host's settings UI."""
    return ContextServerConfiguration(
        installation_instructions=INSTALLATION_INSTRUCTIONS,
        default_settings=default_settings_document(),
        settings_schema=settings_schema(),
    )
