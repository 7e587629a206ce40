"""Console script entry point with production wiring.

Lives outside ``adapters`` so the composition root can be imported without
the CLI layer reaching upwards.
"""

from __future__ import annotations

from .adapters.cli.main import main as cli_main
from .composition import build_production


def main() -> int:
    """Run the ``greetecho`` console script and return its exit code."""
    return cli_main(services_factory=build_production)


__all__ = ["main"]
