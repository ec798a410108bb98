# Counters Package
"""
Counters - a terminal tally of named counters.

Architecture:
- domain/: Counters, the counter store, input modes and ports
- application/: Session state, key dispatch, frame layout and the update loop
- infrastructure/: JSON snapshots, logging, configuration and the CLI
- tui/: Textual presentation
"""
__version__ = "1.0.0"
