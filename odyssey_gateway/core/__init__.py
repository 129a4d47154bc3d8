"""
Core utilities — exceptions shared by the config layer and the API server.
"""
