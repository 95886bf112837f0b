"""Test package root.

Only this directory carries an __init__.py; subdirectories under tests/unit are
namespace directories, so test module basenames must stay unique.
"""
