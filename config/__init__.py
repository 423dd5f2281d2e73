"""Konfiguration: Schema (Pydantic) und YAML-Verwaltung (ruamel.yaml)."""
