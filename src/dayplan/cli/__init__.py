"""Command-line entrypoint (`dayplan`) and its composition root."""
