"""FastAPI application module for ShopFeed.

This module contains the FastAPI application factory, middleware, route
handlers and error handling for the recommendation feed endpoint.
"""
