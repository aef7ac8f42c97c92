"""Conversion services: pass orchestration, file output, errors."""
