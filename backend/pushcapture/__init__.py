"""
PushCapture configuration service.
"""
__version__ = "0.1.0"
