"""
API routes
"""
