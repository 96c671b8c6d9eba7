"""Adapters: schema sources, the quicktype engine and artifact exporters."""
