"""Test suite for the clang declaration extractor.

Test Structure:
- config/: Tests for configuration management
- domain/: Tests for declaration models and the parsing services
- infrastructure/: Tests for clang invocation and logging
- application/: Tests for the two-pass parse and JSON export
- utils/: Tests for path helpers
- integration/: Tests running the real clang frontend

Run tests with pytest:
    pytest                    # Run all tests
    pytest -m unit            # Run unit tests only
    pytest -m integration     # Run clang-backed tests only
"""

__version__ = "0.1.0"
