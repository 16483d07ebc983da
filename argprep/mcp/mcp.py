import sys

from pydantic import ValidationError
from pydantic_settings import (
    CliApp,
    SettingsError,
)

from .cmdline import CLIArguments


def main() -> None:
    """Run argprep-mcp, reporting bad arguments, JSON or settings without a traceback."""
    try:
        CliApp.run(CLIArguments)
    except ValidationError as e:
        print(f"argprep-mcp: invalid input: {e}", file=sys.stderr)
        sys.exit(1)
    except SettingsError as e:
        print(f"argprep-mcp: invalid settings: {e}", file=sys.stderr)
        sys.exit(1)
