"""
Runnable examples
"""
