"""Pytest configuration and fixtures"""
import os

# Set test environment variables before any bookshop import reads them
os.environ.setdefault("SESSION_SECRET", "test_secret")
os.environ.setdefault("SESSION_BACKEND", "cookie")
os.environ.setdefault("LOG_LEVEL", "DEBUG")
