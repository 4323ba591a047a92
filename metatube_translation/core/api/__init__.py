"""
MetaTube server API client
"""
