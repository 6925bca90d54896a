"""
Data access layer.

Design rules:
- Views call ONLY functions in data/service.py.
- Every Supabase call is wrapped to allow graceful fallback to local data.
- No env var reads here (config-only).
"""
