"""Shared constants and environment-driven settings for sample-stats."""

import os

# ── Bandwidth rules ─────────────────────────────────────────────────────────
SCOTT_COEFFICIENT = 3.49        # Scott's Normal Reference Rule
FD_COEFFICIENT = 2.0            # Freedman–Diaconis' choice

RULE_FD = "fd"
RULE_SCOTT = "scott"
RULES = (RULE_FD, RULE_SCOTT)
RULE_LABELS = {
    RULE_FD: "Freedman–Diaconis",
    RULE_SCOTT: "Scott",
}

# ── Runtime settings (override via environment) ────────────────────────────
DEFAULT_RULE = os.environ.get("SAMPLE_STATS_RULE", RULE_FD).lower()
LOG_LEVEL = os.environ.get("SAMPLE_STATS_LOG_LEVEL", "INFO").upper()
PLOT_DPI = int(os.environ.get("SAMPLE_STATS_PLOT_DPI", "150"))
BAR_WIDTH = int(os.environ.get("SAMPLE_STATS_BAR_WIDTH", "40"))  # text histogram columns
MAX_BINS = int(os.environ.get("SAMPLE_STATS_MAX_BINS", "10000"))  # histogram_bins refuses wider grids
