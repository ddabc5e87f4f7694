"""
Alumni Portal
REST backend for student/alumni profiles, professional history,
interview experiences and society memberships.
"""

__version__ = "1.0.0"
