"""
API routers for PushCapture.
"""
