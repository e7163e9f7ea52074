"""Test suite for easekit.

Test Structure:
- unit/: Unit tests for individual components, mirroring packages/easekit
  - curves/: Curve functions, transforms, registry and catalogues
  - config/: Configuration models and loader
  - utils/: Math and logging utilities
  - cli/: Command-line entry point
- conftest.py: Shared fixtures and test configuration
"""
