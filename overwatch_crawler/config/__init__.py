"""
Configuration for the Overwatch Crawler
"""
