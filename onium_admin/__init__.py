"""
Onium Admin - administrative backend for the Onium storefront
"""
