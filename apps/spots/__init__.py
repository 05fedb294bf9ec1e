"""Spots app package.

Listings owned by hosts, their images, and the discovery engine: search
parameter compilation plus read-time enrichment with the average rating
and preview image of every returned spot.
"""
