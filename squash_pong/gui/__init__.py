"""
Pygame interface of Squash Pong
"""
