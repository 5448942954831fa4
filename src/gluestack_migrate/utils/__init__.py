"""
Utility helpers (console/logging, node dumps).
"""
