"""Test fixtures for landscaper-cli testing.

- Blueprint documents and writers: blueprints.py
"""
