"""
Per-service repository modules for database access.

Repositories are plain functions over a `Session`: they query, persist and
commit, and leave validation and state rules to `licensing.services`.
"""
