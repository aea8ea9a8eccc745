"""Demo driver: builds a few BigInt values and logs their decimal forms.

Run with ``bigint-demo`` (or ``python -m src.demo``). Set
``BIGINT_TRACE_DIGITS=true`` and ``BIGINT_LOG_LEVEL=DEBUG`` to see every
digit pushed during parsing.
"""

from __future__ import annotations

import structlog

from src.core.math import BigInt, parse, pow2
from src.core.settings import configure_logging, get_settings

log = structlog.get_logger()

DEMO_VALUES = ("-123456789", "2")


def build_demo_values() -> dict[str, BigInt]:
    """Parse the demo inputs and derive a few values from them."""
    x, y = (parse(text) for text in DEMO_VALUES)

    scaled = x.copy()
    scaled.mul_signed(-1000)

    return {
        "x": x,
        "y": y,
        "x*y": x * y,
        "x*-1000": scaled,
        "x*x": x * x,
        "2**128": pow2(128),
    }


def main() -> int:
    configure_logging(get_settings())

    for name, value in build_demo_values().items():
        log.info("demo.value", name=name, value=str(value), limbs=value.limbs)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
