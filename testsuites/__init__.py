"""
Test suites package.

This repository keeps `testsuites` importable to support:
  - page objects and the framework plugin (`testsuites.ui_testing`)
  - programmatic runners (e.g., `run_tests.py`)
  - CI/CD module imports
"""
