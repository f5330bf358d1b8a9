"""
Core enums, models and exceptions for the CareConnect agent.
"""
