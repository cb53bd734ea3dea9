"""Entry point: python -m providergen -i INPUT -o OUTPUT

Reads _config.json and the entity files from INPUT, generates the Android
sources under OUTPUT.
"""

from __future__ import annotations

from .cli import main

if __name__ == "__main__":
    main()
