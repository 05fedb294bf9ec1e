"""Reviews app package.

Star ratings and text left by users for spots, plus review images.
"""
