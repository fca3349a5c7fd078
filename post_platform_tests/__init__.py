"""
Tests for the post service: JSON API, HTML pages, accounts and migrations.
"""
