"""
Data access layer for the Branch Content Engine.

Jobs are stored in Redis; see repositories/job_repository.py for the key layout.
"""
