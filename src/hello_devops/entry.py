"""Console script entry point (``hello-devops``) with production wiring.

Lives at package level rather than inside ``adapters`` so that the
composition root can be imported without the CLI adapter importing it.
"""

from __future__ import annotations

from .adapters.cli.main import main as cli_main
from .composition import build_production


def main() -> int:
    """Run the CLI with production services and return its exit code.

    Invoked without arguments it prints the greeting and returns 0.
    """
    return cli_main(services_factory=build_production)


__all__ = ["main"]
