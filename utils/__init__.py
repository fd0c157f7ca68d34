"""
Utility modules for the IP Address Validator.
"""
