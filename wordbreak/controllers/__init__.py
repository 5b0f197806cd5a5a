"""
Controllers Package

Contains the HTTP blueprints of the word endpoint.
"""
