"""
CareConnect chat assistant: professionals, jobs and bookings over Firestore.
"""

__version__ = "1.0.0"
