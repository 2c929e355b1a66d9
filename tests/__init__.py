"""
Only the root tests directory has an __init__.py; subdirectories are namespace packages.

Keep test module basenames unique across the tree (e.g., `test_currency_registry.py`), because pytest
imports them by basename when subdirectories carry no __init__.py.
"""
