"""
landscaper-cli Test Suite
"""
