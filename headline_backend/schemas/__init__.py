"""
Pydantic schemas for API request and response validation.

Response models expose camelCase field names (generalScore, targetAudience)
because that is the contract the frontend consumes.
"""
