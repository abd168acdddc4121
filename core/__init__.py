"""
Core package: models, services and type adapters
"""
