"""Service layer: wraps validators into ServiceResult for the CLI."""
