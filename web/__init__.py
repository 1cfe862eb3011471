"""
Web interface for the burst scheduler simulator
"""
