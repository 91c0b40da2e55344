"""
Adapters between raw AI model output and the analysis services
"""
