"""Unit tests for couchwire, laid out like the src/couchwire package."""
