"""
Test suite for the password_renderer project.
"""
