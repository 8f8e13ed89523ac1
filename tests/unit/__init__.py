"""
Unit tests for the weather inference layer.

Engines are stubbed or faked; no model runtime is required.
"""
