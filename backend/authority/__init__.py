"""
DirectDrive authority engine
Citation detection and competitive analysis over AI model responses
"""

__version__ = "1.0.0"
