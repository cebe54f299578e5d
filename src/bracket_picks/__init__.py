"""Log5 bracket outcome probabilities and expected-points pick selection."""

from __future__ import annotations

__version__ = "0.1.0"
