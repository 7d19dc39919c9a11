"""
Configuration module.

Frozen default parameters, an optional YAML override file, and validation.
"""
