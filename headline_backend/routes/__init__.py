"""
FastAPI routers for all API endpoints.

- headlines: POST /api/analyze, POST /api/generate
- health: GET /health
"""
