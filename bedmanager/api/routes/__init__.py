"""
Route modules for the bed management API.
"""
