"""
Test suite for has_nerd_font.

This package contains:
- Unit tests for each detection layer
- Resolver tests against config files written to temporary homes
- End-to-end tests of the pipeline and CLI
"""
