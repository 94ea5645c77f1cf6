"""Adapters for the outside world: model backends and the HTTP API."""
