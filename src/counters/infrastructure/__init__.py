# Counter Infrastructure Layer
"""
Infrastructure layer containing:
- Errors: Setup and save failures
- JSON repository: Snapshot persistence
- Logging: Structured logging
- CLI: Configuration and the command-line entry point
"""
