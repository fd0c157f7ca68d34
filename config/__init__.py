"""
Configuration modules for the IP Address Validator.
"""
