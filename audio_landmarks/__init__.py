"""
Audio Landmarks - time-frequency landmark extraction for audio fingerprinting.
"""

__version__ = "1.0.0"
