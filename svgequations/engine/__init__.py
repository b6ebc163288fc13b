"""Conversion engine: run config, per-run data and the converter."""
