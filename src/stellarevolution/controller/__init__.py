"""
The CONTROLLER layer drives the model forward in time.
It owns the Qt timer and exposes the session state through Qt signals.
"""
