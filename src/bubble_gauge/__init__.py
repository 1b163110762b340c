"""
BUBBLE GAUGE - AI Market Overheating Risk Panel

BUBBLE GAUGE answers one question only:
"How many systemic overheating signals are flashing, and what
does that say about the market as a whole?"

Design Principles:
- Ten fixed gauges, each with configured thresholds
- Per-gauge levels: safe / warning / danger
- One overall verdict: NORMAL / CAUTION / OVERHEATING / BUBBLE
- Deterministic, rule-based
- Missing readings are reported, never guessed
- No data sourcing, no rendering, no history
"""

__version__ = "1.0.0"
