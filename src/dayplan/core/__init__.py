"""Shared building blocks: errors, the Clock port and its system implementation, per-run state."""
