"""
Zero Waste Chef Services Module
Core business logic: credentials, recipes, suggestions and community features
"""
