"""Shared kernel: utilities, request context and telemetry."""
