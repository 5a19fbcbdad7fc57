"""
Job Aggregator Services

This package contains the core Python services:
- providers: Clients for the Adzuna, Reed and USAJobs search APIs
- search: Single-provider and combined search with fallback listings
- rate_limiting: Per-client request budgets
- health: Credential-presence reporting
- shared: Unified job record and structured logging
"""
