"""Marketplace module for ShopFeed.

Contains the recommendation item model, the mock item generator, the Shopee
request signer and the providers that the API delegates to.
"""
