"""
Profile & Image API
"""
