"""JSONL telemetry for simulation runs."""
